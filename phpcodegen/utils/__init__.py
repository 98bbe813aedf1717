from .values import export_value, is_primitive

__all__ = ["export_value", "is_primitive"]
