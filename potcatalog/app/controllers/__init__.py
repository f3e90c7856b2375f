"""UI controllers bridging reactive state and Flet controls."""

from .form_controller import FormController
from .list_presenter import ListPresenter, PotRow

__all__ = ["FormController", "ListPresenter", "PotRow"]
