"""Split calculation strategies"""

from costshare.core.exceptions import ValidationError
from costshare.models.expense import SplitType
from costshare.services.split_strategies.base import BaseSplitStrategy
from costshare.services.split_strategies.even_split import EvenSplitStrategy
from costshare.services.split_strategies.percentage_split import \
    PercentageSplitStrategy


def get_split_strategy(split_type: SplitType) -> BaseSplitStrategy:
    """
    Get appropriate split strategy based on split type.

    Args:
        split_type: Type of split (EVEN or CUSTOM)

    Returns:
        Instance of appropriate strategy

    Raises:
        ValidationError: If split_type is not recognized
    """
    strategies = {
        SplitType.EVEN: EvenSplitStrategy(),
        SplitType.CUSTOM: PercentageSplitStrategy(),
    }

    strategy = strategies.get(split_type)
    if strategy is None:
        raise ValidationError(f"Unknown split type: {split_type}")

    return strategy


__all__ = [
    "BaseSplitStrategy",
    "EvenSplitStrategy",
    "PercentageSplitStrategy",
    "get_split_strategy",
]
