from wikibase_fetcher.models.data_filter import DocumentDataFilter


def test_default_filter_excludes_nothing():
    data_filter = DocumentDataFilter()

    assert not data_filter.excludes_all_languages
    assert not data_filter.excludes_all_site_links
    assert not data_filter.excludes_all_properties
    assert data_filter.include_language("en")
    assert data_filter.include_site_link("enwiki")


def test_empty_sets_exclude_everything():
    data_filter = DocumentDataFilter(language_filter=set(), site_link_filter=set(), property_filter=set())

    assert data_filter.excludes_all_languages
    assert data_filter.excludes_all_site_links
    assert data_filter.excludes_all_properties
    assert not data_filter.include_language("en")


def test_assignment_is_validated():
    data_filter = DocumentDataFilter()
    data_filter.language_filter = {"en", "fr"}

    assert data_filter.language_filter == frozenset({"en", "fr"})
    assert data_filter.include_language("fr")
    assert not data_filter.include_language("de")


def test_partial_property_filter_is_not_exclusion():
    data_filter = DocumentDataFilter(property_filter={"P31"})
    assert not data_filter.excludes_all_properties


def test_snapshot_is_independent():
    data_filter = DocumentDataFilter(language_filter={"en"})
    snapshot = data_filter.snapshot()

    data_filter.language_filter = {"de"}
    data_filter.site_link_filter = set()

    assert snapshot.language_filter == frozenset({"en"})
    assert snapshot.site_link_filter is None
