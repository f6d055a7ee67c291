from actioninputs.catalog.loader import load_catalog, register_catalog
from actioninputs.catalog.registry import ActionTypeRegistry, register_action_type

__all__ = ["ActionTypeRegistry", "load_catalog", "register_action_type", "register_catalog"]
