"""Coordinators - Orchestration layer connecting UI with business logic."""

from .translator_controller import TranslatorController

__all__ = ["TranslatorController"]
