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

import os
import sys

from unionfind.util import expand_response_files, file_printer, shell_split

import pytest


@pytest.mark.skipif(os.name != "posix", reason="POSIX only")
@pytest.mark.parametrize(
    "cmdline, expected_args",
    [
        ("a b c", ["a", "b", "c"]),
        ('"a b" c', ["a b", "c"]),
        ("a\\ b c", ["a b", "c"]),
        ("", []),
    ],
)
def test_posix_shell_split(cmdline, expected_args):
    assert shell_split(cmdline) == expected_args


def test_expand_response_files(tmp_path):
    rsp_file = tmp_path / "args.rsp"
    rsp_file.write_text("b.toml\nc.toml")
    assert expand_response_files(["a.toml", "@" + str(rsp_file), "d.toml"]) == [
        "a.toml",
        "b.toml",
        "c.toml",
        "d.toml",
    ]


def test_file_printer(tmp_path, capsys):
    with file_printer("-") as print:
        print("to stdout")
    assert capsys.readouterr().out == "to stdout\n"

    out_file = tmp_path / "out.txt"
    with file_printer(str(out_file)) as print:
        print("to file")
    assert out_file.read_text() == "to file\n"


@pytest.mark.skipif(not sys.platform.startswith("win"), reason="Windows only")
@pytest.mark.parametrize(
    "cmdline, expected_args",
    [
        ('"a b c" d e', ["a b c", "d", "e"]),
        ('ab\\"c \\ d', ['ab"c', "\\", "d"]),
        ('ab ""', ["ab", ""]),
    ],
)
def test_windows_shell_split(cmdline, expected_args):
    assert shell_split(cmdline) == expected_args
