"""ERGM model definition."""

from ergm.model.types import Model

__all__ = ["Model"]
