"""
credibility/base.py

Abstract base interface for vendor score models.
All score model implementations must inherit from BaseScoreModel.
"""

from abc import ABC, abstractmethod

from credibility.models import EarningsSummary, VendorMetrics


class BaseScoreModel(ABC):
    """Abstract base class for vendor score models.

    Defines the interface that all score model implementations
    must follow. Implementations must be total over well-typed
    inputs: no I/O, no logging side effects, no exceptions for
    edge values such as zero placed orders.
    """

    @abstractmethod
    def compute(self, metrics: VendorMetrics, earnings: EarningsSummary) -> int:
        """Compute a score from a vendor snapshot.

        Args:
            metrics: Operational metrics of the vendor.
            earnings: Earnings summary derived from the vendor's ledger.

        Returns:
            An integer score. The valid range is defined by the
            implementing subclass.

        Raises:
            NotImplementedError: If the subclass does not implement
                                 this method.
        """
        raise NotImplementedError("Subclasses must implement compute()")
