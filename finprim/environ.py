#
# Copyright (c) 2026 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import os

from importlib.metadata import version, PackageNotFoundError


log_level: str = os.environ.get('FINPRIM_LOG_LEVEL', 'WARNING').upper()


def get_version() -> str:
    try:
        return version('finprim')
    except PackageNotFoundError:
        return 'unknown'
