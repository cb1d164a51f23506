from .name_rules import name_rules

__all__ = ["name_rules"]
