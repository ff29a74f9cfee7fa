
class CheckoutError(Exception):
    """Base class for checkout validation failures shown to the customer."""
    pass


class InsufficientPointsError(CheckoutError):
    """Raised when a reward costs more points than the customer holds."""

    def __init__(self, reward_id: str, required: int, available: int) -> None:
        super().__init__(
            f"You need {required} points to redeem this reward, but you only have {available} points."
        )
        self.reward_id = reward_id
        self.required = required
        self.available = available


class UnknownRewardError(CheckoutError, KeyError):
    """Raised when a redeemable reward id is not in the rewards catalog."""
    pass


class NoServicesSelectedError(CheckoutError):
    """Raised when a booking is confirmed without any priced services."""
    pass
