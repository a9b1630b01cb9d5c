from szdelays.sources.sz.config import SzConfig, load_config


def get_sz_config() -> SzConfig:
    return load_config()
