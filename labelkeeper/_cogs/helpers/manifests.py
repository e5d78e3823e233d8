"""
Loading & dumping of the resource manifests for the command-line tools.

The manifests are YAML or JSON files (JSON is a subset of YAML, so both
are parsed the same way), with exactly one object per file.
The path ``-`` means the standard input/output, as usual for CLI tools.
"""
import enum
import json
import sys
from typing import Any, Mapping, MutableMapping

import yaml


class ManifestError(Exception):
    """ A manifest cannot be read or is not a single resource object. """


class OutputFormat(enum.Enum):
    YAML = 'yaml'
    JSON = 'json'


def load(path: str) -> MutableMapping[str, Any]:
    try:
        if path == '-':
            data = yaml.safe_load(sys.stdin)
        else:
            with open(path, encoding='utf-8') as f:
                data = yaml.safe_load(f)
    except OSError as e:
        raise ManifestError(f"Cannot read the manifest {path!r}: {e}") from e
    except yaml.YAMLError as e:
        raise ManifestError(f"Cannot parse the manifest {path!r}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"The manifest {path!r} is not an object: {type(data).__name__}.")
    return data


def dump(body: Mapping[str, Any], output_format: OutputFormat = OutputFormat.YAML) -> str:
    if output_format is OutputFormat.JSON:
        return json.dumps(body, indent=2, sort_keys=True) + '\n'
    else:
        return yaml.safe_dump(dict(body), default_flow_style=False, sort_keys=True)
