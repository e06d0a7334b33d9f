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

"""Small helper functions."""

import contextlib
from functools import partial
import os
import shlex
import sys
from typing import List


def expand_response_files(argv: List[str]) -> List[str]:
    """
    Extend argument list with MSVC-style '@'-prefixed response files.

    Lets a build system pass a list of config files longer than the shell's
    maximum command-line length.

    References:
    https://ninja-build.org/manual.html ("Rule variables")
    https://docs.microsoft.com/en-us/cpp/build/reference/at-specify-a-compiler-response-file
    """
    result = []
    for arg in argv:
        if arg.startswith("@"):
            with open(arg[1:], "r") as rspfile:
                rspfile_content = rspfile.read()
            result.extend(shell_split(rspfile_content))
        else:
            result.append(arg)
    return result


# Python has no cmdline2list() equivalent to list2cmdline(), so we resort to
# using the MS C runtime's CommandLineToArgvW() function via ctypes.
if sys.platform.startswith("win"):
    from ctypes import POINTER, byref, c_int, windll  # type: ignore
    from ctypes.wintypes import LPCWSTR, LPWSTR, HLOCAL  # type: ignore

    CommandLineToArgvW = windll.shell32.CommandLineToArgvW
    CommandLineToArgvW.argtypes = [LPCWSTR, POINTER(c_int)]
    CommandLineToArgvW.restype = POINTER(LPWSTR)

    LocalFree = windll.kernel32.LocalFree
    LocalFree.argtypes = [HLOCAL]
    LocalFree.restype = HLOCAL

    def shell_split(s: str) -> List[str]:
        """Split a response file into arguments following the MS C runtime rules."""
        argc = c_int(0)
        # argv[0] is the program name, ignored
        cmdline = "unionfind.exe " + s
        argv = CommandLineToArgvW(cmdline, byref(argc))
        result = [argv[i] for i in range(1, argc.value)]
        LocalFree(argv)
        return result

else:

    def shell_split(s: str) -> List[str]:
        """Split a shell command line into a list of arguments."""
        return shlex.split(s, posix=os.name == "posix")


@contextlib.contextmanager
def file_printer(filename):
    if filename == "-":  # conventionally means print to stdout
        yield print
    else:
        with open(filename, "w") as f:
            yield partial(print, file=f)
