from chirp.utils.logging import configure_logging, get_logger, set_component_level

__all__ = ["configure_logging", "get_logger", "set_component_level"]
