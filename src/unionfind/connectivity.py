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

"""Answers same-group queries for the universes described by config files.

Usage:

unionfind [config.toml ...] [@response_file]

Writes one row per query:

3,7,same
3,9,different

With no config files the packaged default config is used.
"""

from absl import app
from absl import flags
from absl import logging
from pathlib import Path
from typing import Hashable, Iterator, Tuple
from unionfind import config
from unionfind.config import UnionFindConfig
from unionfind.disjoint_set import DisjointSet
from unionfind import util


FLAGS = flags.FLAGS


flags.DEFINE_string(
    "log_level",
    "INFO",
    "The threshold for what messages will be logged. One of DEBUG, INFO, WARN, "
    "ERROR, or FATAL.",
)


def connected(ds: DisjointSet, a: Hashable, b: Hashable) -> bool:
    return ds.find(a) == ds.find(b)


def build(union_find_config: UnionFindConfig) -> DisjointSet:
    ds = DisjointSet(union_find_config.elements)
    for a, b in union_find_config.unions:
        logging.debug("union %r %r", a, b)
        ds.union(a, b)
    return ds


def answer_queries(
    union_find_config: UnionFindConfig,
) -> Iterator[Tuple[Hashable, Hashable, bool]]:
    ds = build(union_find_config)
    for a, b in union_find_config.queries:
        yield a, b, connected(ds, a, b)


def _csv_line(a: Hashable, b: Hashable, same: bool) -> str:
    return ",".join((str(a), str(b), "same" if same else "different"))


def _run(argv):
    logging.set_verbosity(FLAGS.log_level)

    args = util.expand_response_files(argv[1:])
    not_toml = [f for f in args if not f.endswith(".toml")]
    if not_toml:
        raise app.UsageError(f"Expected .toml config files, got {not_toml}")

    if args:
        union_find_configs = config.load_configs(tuple(Path(f) for f in args))
    else:
        union_find_configs = (config.load(),)

    logging.info(f"Proceeding with {len(union_find_configs)} config(s)")

    for union_find_config in union_find_configs:
        with util.file_printer(union_find_config.output_file) as print:
            for answer in answer_queries(union_find_config):
                print(_csv_line(*answer))
        logging.info(
            "%d elements, %d unions, %d queries -> %s",
            len(union_find_config.elements),
            len(union_find_config.unions),
            len(union_find_config.queries),
            union_find_config.output_file,
        )


def main():
    # We don't seem to be __main__ when run as cli tool installed by setuptools
    app.run(_run)


if __name__ == "__main__":
    app.run(_run)
