"""Appends one JSON array of samples per run to a lines-oriented output file."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence, Union

from sampling.models import Sample
from sampling.serializer import stringify_decimals

logger = logging.getLogger(__name__)


def serialize_samples(samples: Sequence[Sample]) -> str:
    return json.dumps(stringify_decimals(list(samples)), separators=(',', ':'))


def append_samples(path: Union[str, Path], samples: Sequence[Sample]) -> Path:
    """Writes ``samples`` as a single line, creating the file if needed and never truncating it."""
    line = serialize_samples(samples) + '\n'
    output_path = Path(path)
    with output_path.open('a', encoding='utf-8') as fh:
        fh.write(line)
    logger.info("Appended %d samples (%d bytes) to %s", len(samples), len(line), output_path)
    return output_path
