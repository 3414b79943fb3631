from __future__ import annotations

from .common import *
from .connections import *
