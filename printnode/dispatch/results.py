"""
Dispatch Results

Two result variants, distinguished by `kind`:
- EntityResult: decoded entities (also usable directly as a sequence)
- RawResult: the response itself, for operations the caller inspects
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Literal, Sequence, Union, overload

from printnode.http.parser import RawResponse
from printnode.schemas.entities import Entity


@dataclass(frozen=True)
class EntityResult(Sequence[Entity]):
    """Entities decoded from a 200 response."""
    type_id: str
    entities: tuple[Entity, ...]
    response: RawResponse
    kind: Literal["entities"] = "entities"

    @overload
    def __getitem__(self, index: int) -> Entity: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Entity]: ...

    def __getitem__(self, index):
        return self.entities[index]

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.entities)


@dataclass(frozen=True)
class RawResult:
    """A response passed through undecoded."""
    response: RawResponse
    kind: Literal["raw"] = "raw"

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def body(self) -> bytes:
        return self.response.body

    def json(self) -> Any:
        return self.response.json()


DispatchResult = Union[EntityResult, RawResult]
