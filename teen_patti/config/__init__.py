from .config_loader import CONFIG_ENV, config_from_dict, load_game_config, resolve_config

__all__ = ["CONFIG_ENV", "config_from_dict", "load_game_config", "resolve_config"]
