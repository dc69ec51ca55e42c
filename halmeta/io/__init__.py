from .config_loader import ConfigLoader, merge_configs

__all__ = ["ConfigLoader", "merge_configs"]
