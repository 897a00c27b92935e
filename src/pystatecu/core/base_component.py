"""Abstract interface for validating StateCU records.

All StateCU record types (climate stations, crop characteristics,
crop coefficient curves, delay tables and assignments) share the
:class:`ComponentValidator` interface.  This enables generic data set
validation across components.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pystatecu.core.dataset import StateCUDataSet
    from pystatecu.core.validation import ComponentValidation


class ComponentValidator(ABC):
    """Abstract base class for records that can check their own values.

    Every record must implement :meth:`validate`, returning the
    problems found (an empty collection means valid).  Validation
    never modifies the record.
    """

    @abstractmethod
    def validate(
        self,
        dataset: StateCUDataSet | None = None,
        complete: bool = False,
    ) -> ComponentValidation:
        """Check the record values.

        Parameters
        ----------
        dataset : StateCUDataSet, optional
            Data set the record belongs to, for lookups against other
            components.
        complete : bool
            If ``True``, missing values are reported as problems too.
        """
        ...
