from typing import Iterable, Optional

from ..exceptions import MissingRequiredFieldError
from .claims import Claim
from .ranks import Rank
from .references import Reference
from .statements import Statement


def statement_from_claim(
    claim: Optional[Claim],
    references: Optional[Iterable[Reference]],
    rank: Optional[Rank],
    statement_id: Optional[str],
) -> Statement:
    """Build a statement from an existing claim (older call shape)."""
    if claim is None:
        raise MissingRequiredFieldError("claim")
    return Statement(
        statement_id=statement_id,
        rank=rank,
        main_snak=claim.main_snak,
        qualifiers=claim.qualifiers,
        references=tuple(references) if references is not None else None,
        subject=claim.subject,
    )
