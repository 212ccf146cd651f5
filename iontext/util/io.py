#
# Copyright (c) 2023 Radiance Technologies, Inc.
#
# This file is part of IONTEXT.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program. If not, see
# <http://www.gnu.org/licenses/>.
#
"""
Export and import value trees as JSON or YAML data.
"""
import logging
import os
from pathlib import Path
from typing import Optional, Union

import seutil as su
from seutil.io import Fmt

from iontext.value import IonValue

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def infer_fmt_from_ext(ext: str, default: Optional[Fmt] = None) -> Fmt:
    """
    Infer the `Fmt` of a file from its extension.

    Parameters
    ----------
    ext : str
        A file extension with or without its leading period.
    default : Optional[Fmt], optional
        The format to use if none matches, by default None.

    Returns
    -------
    Fmt
        The first format whose extensions include `ext`.

    Raises
    ------
    ValueError
        If no format matches and no `default` is given.
    """
    if ext.startswith("."):
        ext = ext[1 :]

    for fmt in Fmt:
        if fmt.exts is not None and ext in fmt.exts:
            return fmt

    if default is not None:
        return default
    else:
        raise ValueError(f'Cannot infer format for extension "{ext}"')


def dump_value(
        value: IonValue,
        output_filepath: PathLike,
        fmt: Optional[Fmt] = None) -> Path:
    """
    Write a value tree to a file as plain data.

    Annotations are not preserved; see `IonValue.to_python_ds`.

    Parameters
    ----------
    value : IonValue
        The value to write.
    output_filepath : PathLike
        The destination file.
    fmt : Optional[Fmt], optional
        The output format, by default inferred from the extension of
        `output_filepath`.

    Returns
    -------
    Path
        The path of the written file.
    """
    output_filepath = Path(output_filepath)
    if fmt is None:
        fmt = infer_fmt_from_ext(output_filepath.suffix)
    logger.debug(f"Dumping {value.ion_type} to {output_filepath}")
    su.io.dump(output_filepath, value.to_python_ds(), fmt=fmt)
    return output_filepath


def load_value(filepath: PathLike, fmt: Optional[Fmt] = None) -> IonValue:
    """
    Read plain data from a file into a value tree.

    Parameters
    ----------
    filepath : PathLike
        A file written by `dump_value` or any JSON or YAML file.
    fmt : Optional[Fmt], optional
        The input format, by default inferred from the extension of
        `filepath`.

    Returns
    -------
    IonValue
        The loaded data converted with `IonValue.from_python_ds`.
    """
    filepath = Path(filepath)
    if fmt is None:
        fmt = infer_fmt_from_ext(filepath.suffix)
    return IonValue.from_python_ds(su.io.load(filepath, fmt))
