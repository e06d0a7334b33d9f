# Copyright 2020 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from absl import flags
import importlib.resources as resources
from pathlib import Path
import toml
from typing import (
    Any,
    Callable,
    Hashable,
    Mapping,
    MutableMapping,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
)


FLAGS = flags.FLAGS


_DEFAULT_CONFIG_FILE = "_default.toml"


def _to_int(value: Any) -> int:
    # floats are rejected, int() truncates them
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"{value!r} is not an integer")
    return int(value)


_ELEMENT_TYPES: Mapping[str, Callable[[Any], Hashable]] = {
    "int": _to_int,
    "str": str,
}


# we use None as a sentinel for flag not set; UnionFindConfig has the actual defaults.
# CLI flags override config file (which overrides default UnionFindConfig).
flags.DEFINE_enum(
    "element_type",
    None,
    sorted(_ELEMENT_TYPES),
    "Type elements, unions and queries are converted to.",
)
flags.DEFINE_string("output_file", None, "Output filename ('-' means stdout).")


Pair = Tuple[Hashable, Hashable]


class UnionFindConfig(NamedTuple):
    element_type: str = "str"
    output_file: str = "-"
    elements: Tuple[Hashable, ...] = ()
    unions: Tuple[Pair, ...] = ()
    queries: Tuple[Pair, ...] = ()

    def validate(self):
        if self.element_type not in _ELEMENT_TYPES:
            raise ValueError(
                f"'element_type' must be one of {sorted(_ELEMENT_TYPES)}, "
                f"got {self.element_type!r}"
            )

        universe = set(self.elements)
        for attr_name in ("unions", "queries"):
            unknown = sorted(
                {e for pair in getattr(self, attr_name) for e in pair} - universe,
                key=repr,
            )
            if unknown:
                raise ValueError(f"'{attr_name}' refer to unknown elements {unknown}")

        return self


def write(dest: Path, config: UnionFindConfig):
    toml_cfg = {
        "element_type": config.element_type,
        "output_file": config.output_file,
        "elements": list(config.elements),
        "unions": [list(p) for p in config.unions],
        "queries": [list(p) for p in config.queries],
    }
    dest.write_text(toml.dumps(toml_cfg))


def _resolve_config(config_file: Optional[Path] = None) -> MutableMapping[str, Any]:
    if config_file is None:
        default_config = resources.files("unionfind.data") / _DEFAULT_CONFIG_FILE
        return toml.loads(default_config.read_text())
    return toml.load(config_file)


_DEFAULT_CONFIG = UnionFindConfig()


def _pop_flag(config: MutableMapping[str, Any], name: str) -> Any:
    config_value = config.pop(name, None)
    flag_value = getattr(FLAGS, name)
    if config_value is None and flag_value is None:
        return getattr(_DEFAULT_CONFIG, name)
    return flag_value if flag_value is not None else config_value


def _pairs(
    config: MutableMapping[str, Any], name: str, convert: Callable[[Any], Hashable]
) -> Tuple[Pair, ...]:
    pairs = []
    for pair in config.pop(name, ()):
        if not isinstance(pair, list) or len(pair) != 2:
            raise ValueError(f"'{name}' entries must be [a, b] pairs, got {pair!r}")
        pairs.append((convert(pair[0]), convert(pair[1])))
    return tuple(pairs)


def load(config_file: Optional[Path] = None) -> UnionFindConfig:
    config = _resolve_config(config_file)

    # CLI flags will take precedence over the config file
    element_type = _pop_flag(config, "element_type")
    output_file = _pop_flag(config, "output_file")
    if element_type not in _ELEMENT_TYPES:
        raise ValueError(f"Unknown element_type {element_type!r}")
    convert = _ELEMENT_TYPES[element_type]

    elements = tuple(convert(e) for e in config.pop("elements", ()))
    unions = _pairs(config, "unions", convert)
    queries = _pairs(config, "queries", convert)

    if config:
        raise ValueError(f"Unexpected config: {config}")

    return UnionFindConfig(
        element_type=element_type,
        output_file=output_file,
        elements=elements,
        unions=unions,
        queries=queries,
    ).validate()


def load_configs(config_files: Sequence[Path]) -> Tuple[UnionFindConfig, ...]:
    configs = tuple(load(f) for f in config_files)
    output_files = [c.output_file for c in configs if c.output_file != "-"]
    assert len(output_files) == len(
        set(output_files)
    ), "Configs must not share an output file:\n" + "\n".join(sorted(output_files))
    return configs
