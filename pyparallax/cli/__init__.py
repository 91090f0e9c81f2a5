"""
Command Line Interface for PyParallax

Available Commands:
- generate: Render a TOML layer configuration to a PNG (ppx-generate)
"""

_CLI_SUBMODULES = {
    "generate": (".generate_commands", "generate"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
