"""SuiObject model.

Read-only mapping of the indexer's object table. Rows are written by the
checkpoint indexer; this service only aggregates them.
"""

from sqlalchemy import BigInteger, LargeBinary, Text
from sqlalchemy.orm import Mapped, mapped_column

from objects_api.models.base import Base


class SuiObject(Base):
    """One version of an on-chain object."""

    __tablename__ = "sui_objects"

    object_id: Mapped[str] = mapped_column(Text, primary_key=True)
    object_version: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    object_digest: Mapped[str] = mapped_column(Text)
    checkpoint_sequence_number: Mapped[int] = mapped_column(BigInteger)

    # Ownership
    owner_type: Mapped[str | None] = mapped_column(Text)
    owner_id: Mapped[str | None] = mapped_column(Text)

    # Fully qualified Move type, e.g. "0x2::coin::Coin<0x2::sui::SUI>"
    object_type: Mapped[str | None] = mapped_column(Text)
    object_bcs: Mapped[bytes | None] = mapped_column(LargeBinary)

    def __repr__(self) -> str:
        return f"<SuiObject {self.object_id}@{self.object_version}>"
