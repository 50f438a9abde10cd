"""
Unit tests for choice option selection.
"""

import random

from ulpan_app.modules.content import VocabItem
from ulpan_app.modules.exercises.engine.selector import item_identity, select_options


def _words(n):
    return [VocabItem(source_text=f'w{i}', target_text=f't{i}') for i in range(n)]


class TestSelectOptions:

    def test_contains_correct_exactly_once(self):
        pool = _words(20)
        correct = pool[3]
        options = select_options(correct, pool, 10, random.Random(1))

        assert len(options) == 10
        assert [item_identity(o) for o in options].count('t3') == 1

    def test_identities_are_unique(self):
        pool = _words(20)
        options = select_options(pool[0], pool, 10, random.Random(2))
        identities = [item_identity(o) for o in options]
        assert len(set(identities)) == len(identities)

    def test_small_pool_is_exhausted_without_repeats(self):
        pool = _words(3)
        options = select_options(pool[0], pool, 10, random.Random(3))
        assert sorted(o.target_text for o in options) == ['t0', 't1', 't2']

    def test_duplicate_identities_in_pool_are_skipped(self):
        correct = VocabItem('house', 'בית')
        duplicate = VocabItem('home', 'בית')
        other = VocabItem('book', 'ספר')
        options = select_options(correct, [duplicate, other, correct], 4, random.Random(4))

        assert len(options) == 2
        assert correct in options
        assert duplicate not in options

    def test_count_of_one_returns_only_correct(self):
        pool = _words(5)
        assert select_options(pool[2], pool, 1, random.Random(5)) == [pool[2]]

    def test_plain_strings_use_themselves_as_identity(self):
        options = select_options('על', ['ב', 'על', 'ליד', 'בין', 'מתחת ל'], 4, random.Random(6))
        assert len(options) == 4
        assert options.count('על') == 1

    def test_correct_position_varies(self):
        pool = _words(10)
        rng = random.Random(7)
        positions = {select_options(pool[0], pool, 4, rng).index(pool[0]) for _ in range(50)}
        assert len(positions) > 1
