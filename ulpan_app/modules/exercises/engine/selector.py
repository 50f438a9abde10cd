"""
Option selection for choice exercises.
================================================
One correct item plus distractors drawn uniformly, without replacement,
from the rest of the pool. Options never repeat an identity, and the final
order is shuffled so the correct answer's position carries no signal.

Pure logic, no Flask, no I/O.
"""

import random
from typing import Any, Callable, Hashable, List, Optional, Sequence, TypeVar

T = TypeVar('T')


def item_identity(item: Any) -> Hashable:
    """Identity used for deduplication: ``item.identity`` or the item itself."""
    return getattr(item, 'identity', item)


def select_options(
    correct: T,
    pool: Sequence[T],
    count: int,
    rng: Optional[random.Random] = None,
    key: Callable[[T], Hashable] = item_identity,
) -> List[T]:
    """
    Build a shuffled option list containing ``correct`` exactly once.

    Args:
        correct: The item the question is about.
        pool: Candidate items; may contain ``correct`` and duplicates.
        count: Requested option count, correct answer included.
        rng: Random source (module ``random`` when omitted).
        key: Identity function used to reject duplicates.

    Returns:
        ``min(count, distinct identities in pool ∪ {correct})`` options.
    """
    rng = rng or random.Random()
    options = [correct]
    seen = {key(correct)}

    candidates = list(pool)
    rng.shuffle(candidates)
    for candidate in candidates:
        if len(options) >= count:
            break
        identity = key(candidate)
        if identity in seen:
            continue
        seen.add(identity)
        options.append(candidate)

    rng.shuffle(options)
    return options
