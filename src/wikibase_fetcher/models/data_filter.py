from typing import Optional

from pydantic import BaseModel, ConfigDict


class DocumentDataFilter(BaseModel):
    """Restricts which parts of an entity are requested and parsed.

    Each filter is ``None`` for "no restriction" or a set of admitted keys;
    an empty set excludes everything. Properties can only be filtered all
    at once: a non-empty ``property_filter`` is ignored.
    """

    language_filter: Optional[frozenset[str]] = None
    site_link_filter: Optional[frozenset[str]] = None
    property_filter: Optional[frozenset[str]] = None

    model_config = ConfigDict(validate_assignment=True)

    @property
    def excludes_all_languages(self) -> bool:
        return self.language_filter is not None and not self.language_filter

    @property
    def excludes_all_site_links(self) -> bool:
        return self.site_link_filter is not None and not self.site_link_filter

    @property
    def excludes_all_properties(self) -> bool:
        return self.property_filter is not None and not self.property_filter

    def include_language(self, language_code: str) -> bool:
        return self.language_filter is None or language_code in self.language_filter

    def include_site_link(self, site_key: str) -> bool:
        return self.site_link_filter is None or site_key in self.site_link_filter

    def snapshot(self) -> "DocumentDataFilter":
        # the filter sets are frozensets, so a shallow copy is independent
        return self.model_copy()
