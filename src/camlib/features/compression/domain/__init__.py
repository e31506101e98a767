"""Domain layer for the compression feature."""

from .models import FailureKind, ResizeDirective, WorkOutcome, WorkState, saved_percent

__all__ = ["FailureKind", "ResizeDirective", "WorkOutcome", "WorkState", "saved_percent"]
