from actioninputs.coercion.engine import coerce_action_arguments, coerce_all, coerce_one

__all__ = ["coerce_action_arguments", "coerce_all", "coerce_one"]
