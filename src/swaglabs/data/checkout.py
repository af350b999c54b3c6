"""Checkout flow state machine.

Info -> Overview -> Complete, with cancel leaving the flow for the cart and
"back home" leaving it for the inventory. Used by CheckoutPage to know which
screen an action should land on.
"""

from __future__ import annotations

from enum import Enum

from swaglabs.core.exceptions import CheckoutTransitionError
from swaglabs.data.models import CheckoutInfo, Screen


class CheckoutStep(str, Enum):
    """Steps of the checkout flow."""

    INFO = "info"
    OVERVIEW = "overview"
    COMPLETE = "complete"  # Terminal

    @property
    def screen(self) -> Screen:
        return _STEP_SCREENS[self]

    @classmethod
    def from_screen(cls, screen: Screen | None) -> CheckoutStep | None:
        for step, step_screen in _STEP_SCREENS.items():
            if step_screen is screen:
                return step
        return None


class CheckoutAction(str, Enum):
    """User actions available inside the checkout flow."""

    CONTINUE = "continue"
    CANCEL = "cancel"
    FINISH = "finish"
    BACK_HOME = "back_home"


_STEP_SCREENS: dict[CheckoutStep, Screen] = {
    CheckoutStep.INFO: Screen.CHECKOUT_INFO,
    CheckoutStep.OVERVIEW: Screen.CHECKOUT_OVERVIEW,
    CheckoutStep.COMPLETE: Screen.CHECKOUT_COMPLETE,
}

# Valid transitions; CONTINUE from INFO is further gated on complete info
CHECKOUT_TRANSITIONS: dict[CheckoutStep, dict[CheckoutAction, Screen]] = {
    CheckoutStep.INFO: {
        CheckoutAction.CONTINUE: Screen.CHECKOUT_OVERVIEW,
        CheckoutAction.CANCEL: Screen.CART,
    },
    CheckoutStep.OVERVIEW: {
        CheckoutAction.FINISH: Screen.CHECKOUT_COMPLETE,
        CheckoutAction.CANCEL: Screen.CART,
    },
    CheckoutStep.COMPLETE: {
        CheckoutAction.BACK_HOME: Screen.INVENTORY,
    },
}


def next_screen(
    step: CheckoutStep,
    action: CheckoutAction,
    info: CheckoutInfo | None = None,
) -> Screen:
    """Return the screen that `action` leads to from `step`.

    Continuing from INFO with incomplete (or no) shipper details keeps the
    flow on INFO; the storefront shows a field error instead of advancing.

    Raises:
        CheckoutTransitionError: If `action` is not available at `step`.
    """
    allowed = CHECKOUT_TRANSITIONS[step]
    if action not in allowed:
        raise CheckoutTransitionError(
            f"Cannot {action.value} from checkout step {step.value}; "
            f"allowed: {[a.value for a in allowed]}"
        )
    if step is CheckoutStep.INFO and action is CheckoutAction.CONTINUE:
        if info is None or not info.is_complete:
            return Screen.CHECKOUT_INFO
    return allowed[action]
