"""buildlayout — build layout descriptor for multi-project Android builds."""

__version__ = "0.1.0"
