"""Counters owned by the ledger store.

Both counters only advance inside the transaction that inserts the record
they number.
"""

from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from learnledger.core.database import Base

LEDGER_STATE_ID = 1


class LedgerState(Base):
    """Single-row table holding the global course counter."""
    __tablename__ = "ledger_state"

    id = Column(Integer, primary_key=True, default=LEDGER_STATE_ID)
    last_course_id = Column(Integer, nullable=False, default=0)


class MaterialCounter(Base):
    """Per-course material counter, created alongside its course."""
    __tablename__ = "material_counters"

    course_id = Column(Integer, ForeignKey("courses.id"), primary_key=True)
    last_material_id = Column(Integer, nullable=False, default=0)

    course = relationship("Course", back_populates="material_counter")
