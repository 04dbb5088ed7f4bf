"""Loader for line-oriented topic-term corpus files."""

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from ..core.corpus import SampleCorpus
from ..core.sparse import SparseTermVector
from ..utils.logging import get_logger
from ..utils.validation import validate_file_exists

logger = get_logger(__name__)

# topic_id topic_weight term weight [term weight ...]
MIN_FIELDS = 4


def parse_topic_line(line: str) -> Optional[Tuple[float, SparseTermVector]]:
    """
    Parse one corpus line.

    Format::

        <topic_id> <topic_weight> <term> <weight> <term> <weight> ...

    Args:
        line: Raw line, surrounding whitespace is ignored

    Returns:
        Tuple of (topic_weight, sample), or None for a line that cannot be
        used. Terms with an unparsable weight are dropped individually.
    """
    fields = line.strip().split()
    if len(fields) < MIN_FIELDS:
        logger.warning(f"Invalid line: {line.strip()!r}")
        return None

    try:
        topic_id = int(fields[0])
    except ValueError:
        logger.warning(f"Invalid topic id: {fields[0]!r}")
        return None

    try:
        topic_weight = float(fields[1])
    except ValueError:
        logger.warning(f"Invalid topic weight for topic {topic_id}: {fields[1]!r}")
        topic_weight = 0.0

    if len(fields) % 2 != 0:
        logger.warning(f"Topic {topic_id} has a term without weight: {fields[-1]!r}")
        fields = fields[:-1]

    terms = {}
    for i in range(2, len(fields), 2):
        term, raw = fields[i], fields[i + 1]
        try:
            terms[term] = float(raw)
        except ValueError:
            logger.warning(f"Invalid field: {term} {raw}")

    return topic_weight, SparseTermVector(topic_id, terms)


def iter_topic_samples(lines: Iterable[str]) -> Iterator[Tuple[float, SparseTermVector]]:
    """Yield (topic_weight, sample) pairs for every usable line.

    A line whose topic id was already seen is skipped; the first one wins.
    """
    seen_ids = set()
    for line in lines:
        if not line.strip():
            continue
        parsed = parse_topic_line(line)
        if parsed is None:
            continue
        sample = parsed[1]
        if sample.id in seen_ids:
            logger.warning(f"Skipping duplicate topic id {sample.id}")
            continue
        seen_ids.add(sample.id)
        yield parsed


def load_topic_corpus(filepath: Union[str, Path]) -> SampleCorpus:
    """
    Load a topic-term corpus file.

    Args:
        filepath: Path to the corpus file (UTF-8)

    Returns:
        Corpus with one SparseTermVector per usable line, in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = validate_file_exists(filepath)
    with open(path, 'r', encoding='utf-8') as f:
        samples: List[SparseTermVector] = [sample for _, sample in iter_topic_samples(f)]

    logger.info(f"Loaded {len(samples)} samples from {path}")
    return SampleCorpus(samples)
