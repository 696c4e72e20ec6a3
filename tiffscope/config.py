"""Decoder settings -- built-in defaults with optional JSON overrides."""

import json
from dataclasses import dataclass, fields


@dataclass
class DecodeConfig:
    """Tunable limits and behaviour for a decode call.

    max_sub_ifd_depth: deepest allowed Exif/GPS/Interoperability nesting.
    require_word_alignment: reject odd out-of-line data offsets.
    interpret_values: apply enumerated/bitfield/GeoKey interpretation.
    """

    max_sub_ifd_depth: int = 4
    require_word_alignment: bool = True
    interpret_values: bool = True

    @classmethod
    def default(cls) -> 'DecodeConfig':
        """Return the built-in settings."""
        return cls()

    @classmethod
    def from_json(cls, path) -> 'DecodeConfig':
        """Load settings from a JSON object and merge over defaults.

        JSON format::

            {
              "max_sub_ifd_depth": 2,
              "require_word_alignment": false
            }

        Omitted keys keep their defaults. Unknown keys are rejected.
        """
        with open(str(path), 'r') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f'Config file {path} must contain a JSON object')

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f'Unknown config keys: {", ".join(sorted(unknown))}')

        config = cls.default()
        for key, value in data.items():
            default_value = getattr(config, key)
            if isinstance(default_value, bool):
                if not isinstance(value, bool):
                    raise ValueError(f'Config key {key!r} must be true or false')
            elif not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f'Config key {key!r} must be a non-negative integer')
            setattr(config, key, value)
        return config
