
import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Unicode, Enum, Bool, Integer, HasTraits, List, TraitError
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .diffing.config import DiffConfig
from .log import set_jsondelta_log_level


CONFIG_BASENAME = 'jsondelta_config'


class JsondeltaConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def config_search_path():
    "Directories searched for config files, in descending priority order."
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    return path


def build_config(entrypoint, include_none=False, path=None):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    if path is None:
        path = config_search_path()
    for c in _load_config_files(CONFIG_BASENAME, path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, JsondeltaConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


class Global(JsondeltaConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class AtomicPaths(List):

    def validate_elements(self, obj, value):
        value = super(AtomicPaths, self).validate_elements(obj, value)
        for p in value:
            if not p.startswith('/'):
                raise TraitError('atomic paths need to start with `/`')
        return value


class Diff(Global):

    detect_moves = Bool(
        True,
        help="rewrite remove/add pairs carrying equal values as move operations.",
    ).tag(config=True)

    sort_keys = Bool(
        False,
        help="visit object keys in sorted order instead of insertion order.",
    ).tag(config=True)

    strict_validation = Bool(
        False,
        help="validate both documents completely before comparing them, "
             "instead of validating values as they are visited.",
    ).tag(config=True)

    atomic_paths = AtomicPaths(
        Unicode(),
        default_value=[],
        help="paths (with list indices given as *) whose values are "
             "replaced as a whole instead of being diffed.",
    ).tag(config=True)


class PrettyPrint(Global):

    use_color = Bool(
        True,
        help="color added and removed values with ANSI escapes.",
    ).tag(config=True)

    snip_length = Integer(
        None,
        allow_none=True,
        min=1,
        help="shorten printed strings longer than this to their head "
             "and an md5 digest. None prints strings in full.",
    ).tag(config=True)


entrypoint_configurables = {
    'diff': Diff,
    'prettyprint': PrettyPrint,
}


def load_settings(entrypoint, path=None):
    """Instantiate the configurable of entrypoint from the built config.

    Values read from disk are validated by the traits, so invalid
    settings raise a TraitError.
    """
    cls = entrypoint_configurables.get(entrypoint)
    config = build_config(entrypoint, path=path)
    traits = cls.class_traits(config=True)
    return cls(**{k: v for k, v in config.items() if k in traits})


def load_diff_config(path=None):
    """Build a DiffConfig from class defaults and config files on disk."""
    settings = load_settings("diff", path=path)
    return DiffConfig(
        detect_moves=settings.detect_moves,
        sort_keys=settings.sort_keys,
        strict_validation=settings.strict_validation,
        atomic_paths=settings.atomic_paths,
    )


def apply_log_level(entrypoint='diff', path=None):
    """Set the jsondelta log level from the configured `log_level`."""
    level = load_settings(entrypoint, path=path).log_level
    set_jsondelta_log_level(level, set_main=False)
    return level


def load_prettyprint_config(out=None, path=None):
    """Build a PrettyPrintConfig from class defaults and config files on disk."""
    from .prettyprint import PrettyPrintConfig
    settings = load_settings("prettyprint", path=path)
    kwargs = {
        "use_color": settings.use_color,
        "snip_length": settings.snip_length,
    }
    if out is not None:
        kwargs['out'] = out
    return PrettyPrintConfig(**kwargs)
