from .loader import AccessorConfig, load_config_from_path

__all__ = ["AccessorConfig", "load_config_from_path"]
