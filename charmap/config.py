import logging
import os
import sys

from charmap.exceptions import ConfigurationError


class Config:
    DEFAULTS = {
        "LOGGING_LEVEL_CONSOLE": logging.INFO,  # See documentation of Logging package
        "LOGGING_LEVEL_FILE": logging.ERROR,
        "LOGGING_FILE": (
            None,
            [type(None), str],
        ),  # or set to file path : '/var/log/charmap.log'
        "LOGGING_FILE_MAX_SIZE": (10, int, (0, 0xFFFFFFFF)),  # Max log file size in MB
        "LOGGING_FILE_MAX_FILES": (
            2,
            int,
            (0, 0xFFFFFFFF),
        ),  # Max old log files to keep
        "LOGGING_DUMP_SUBSTITUTIONS": False,  # Log every conversion that substituted unmappable input
        # Encodings
        "ENCODINGS": [],  # Canonical names to register. Empty registers every shipped table
        "ENCODING_ALIASES": {},  # Additional aliases: {"LATIN-2": "ISO-8859-2"}
        "ENCODE_TIE_BREAK": (
            "first",
            str,
            ["first", "last"],
        ),  # Byte kept when two bytes of a table decode to the same codepoint
        # Python codecs module
        "PYTHON_CODECS_ENABLE": False,  # Make encodings available to bytes.decode/str.encode
        "PYTHON_CODECS_PREFIX": ("charmap", str),  # b"..".decode("charmap-iso-8859-2")
    }

    CONFIG_LOADED = False
    CONFIG_FILE_LOCATION = None

    def __dir__(self):
        return list(self.DEFAULTS.keys()) + list(self.__class__.__dict__) + dir(super())

    def __init__(self):
        self._reset_defaults()

    def load(self, alt_location=None):
        self.CONFIG_LOADED = False

        self._find_config(alt_location)

        if self.CONFIG_FILE_LOCATION is not None:
            entries = self._read_config()
        else:
            entries = {}
        self._update_from_environment(entries)

        # Set values
        for k, v in entries.items():
            if k[0].isupper() and k in self.DEFAULTS:
                default = self.DEFAULTS.get(k)

                if isinstance(default, tuple) and 2 <= len(default) <= 3:
                    default_type = default[1]

                    if not isinstance(default_type, list):
                        default_type = [default_type]

                else:
                    default_type = [type(default)]

                if float in default_type and int not in default_type:
                    default_type.append(int)
                if int in default_type and float not in default_type:
                    default_type.append(float)
                if type(v) in default_type:
                    setattr(self, k, v)
                else:
                    err = "Error parsing configuration: Invalid value type {} for config argument {}. Allowed are: {}".format(
                        type(v), k, default_type
                    )
                    sys.stderr.write(err + "\n")
                    raise ConfigurationError(err)

                if isinstance(default, tuple) and len(default) == 3:
                    expected_value = default[2]
                    valid = False

                    if isinstance(v, int):
                        if expected_value[0] <= v <= expected_value[1]:
                            valid = True
                    elif isinstance(v, str):
                        if v in expected_value:
                            valid = True
                    else:
                        valid = True

                    if valid:
                        setattr(self, k, v)
                    else:
                        err = "Error parsing configuration value: Invalid value for config argument {} (type {}). Allowed are in: {}".format(
                            k, type(v), expected_value
                        )
                        sys.stderr.write(err + "\n")
                        raise ConfigurationError(err)

        self.CONFIG_LOADED = True

    def _update_from_environment(self, entries):
        # Updates values from env variables
        for args in os.environ:
            if not args.startswith("CHARMAP_") or len(args) < 9:
                continue
            opt = args[8:]
            if opt in self.DEFAULTS:
                entries[opt] = self._parse_environment_value(
                    self.DEFAULTS[opt], os.environ[args]
                )

    @staticmethod
    def _parse_environment_value(default, v):
        if isinstance(default, tuple):
            default = default[0]

        if isinstance(default, bool):
            return v.lower() in ("1", "true", "yes", "on")
        if isinstance(default, list):
            return [item.strip() for item in v.split(",") if item.strip()]
        if isinstance(default, dict):
            # "LATIN-2=ISO-8859-2,CYR=ISO-8859-5"
            pairs = (item.split("=", 1) for item in v.split(",") if "=" in item)
            return {key.strip(): value.strip() for key, value in pairs}
        if v.isdigit():
            return int(v)
        return v

    def _read_config(self):
        entries = {}
        conf_extension = os.path.splitext(self.CONFIG_FILE_LOCATION)[1]
        if conf_extension in [".conf", ".py"]:
            with open(self.CONFIG_FILE_LOCATION) as f:
                exec(f.read(), None, entries)
        elif conf_extension in [".json"]:
            import json

            with open(self.CONFIG_FILE_LOCATION) as f:
                entries = json.load(f)
        elif conf_extension in [".yaml"]:
            import yaml

            with open(self.CONFIG_FILE_LOCATION) as f:
                entries = yaml.safe_load(f) or {}
        else:
            err = "ERROR: Unsupported configuration file type"
            sys.stderr.write(err + "\n")
            raise ConfigurationError(err)
        return entries

    def _find_config(self, alt_location):
        self.CONFIG_FILE_LOCATION = None

        env_config_path = os.environ.get("CHARMAP_CONFIG_FILE")
        if alt_location is not None:
            locations = [alt_location]
        elif env_config_path:
            locations = [env_config_path]
        else:
            filenames = ["charmap.conf", "charmap.json", "charmap.yaml"]
            locations = [
                os.path.join(dir, filename)
                for dir in [
                    os.path.realpath(os.getcwd()),
                    os.path.expanduser("~/.local/etc"),
                    "/etc/charmap",
                ]
                for filename in filenames
            ]
        for location in locations:
            location = os.path.expanduser(location)
            if os.path.exists(location) and os.path.isfile(location):
                self.CONFIG_FILE_LOCATION = location
                break
        else:
            # Searching default locations may find nothing: defaults and environment apply
            if alt_location is not None or env_config_path:
                err = f"ERROR: Could not find configuration file. Tried: {locations}"
                sys.stderr.write(err + "\n")
                raise ConfigurationError(err)

    def _reset_defaults(self):
        # Reset defaults
        for k, v in self.DEFAULTS.items():
            if isinstance(v, tuple):
                v = v[0]

            if isinstance(v, (list, dict)):
                v = v.copy()

            setattr(self, k, v)


config = Config()
