import random
import unittest

from game import (
    SPECIES,
    PlayArea,
    empty_play_area,
    parse_card,
    position_score,
    score_play_area,
    should_accelerate,
)
from arboretum_core.scoring import board_score, hand_score


def hand_of(*texts):
    return [parse_card(t) for t in texts]


def make_area(cells):
    return PlayArea.from_cells({coord: parse_card(text) for coord, text in cells.items()})


class TestPlayAreaScore(unittest.TestCase):
    def test_given_empty_area_when_scoring_then_zero_for_every_species(self):
        for s in SPECIES:
            self.assertEqual(score_play_area(empty_play_area(), s), (0, []))
        self.assertEqual(position_score(empty_play_area(), [], []), 0)

    def test_given_area_when_scoring_species_then_rank_sum_of_that_species(self):
        area = make_area({(0, 0): 'J1', (1, 0): 'J7', (0, 1): 'R8', (-1, 0): 'C3'})
        self.assertEqual(score_play_area(area, 'J'), (8, []))
        self.assertEqual(score_play_area(area, 'R'), (8, []))
        self.assertEqual(score_play_area(area, 'W'), (0, []))
        self.assertEqual(board_score(area), 19)


class TestPositionScore(unittest.TestCase):
    def test_given_board_and_hand_when_scoring_then_hand_potential_weighted_half(self):
        area = make_area({(0, 0): 'J1', (1, 0): 'R2'})
        hand = hand_of('J1', 'J5', 'R8')
        # board 3; hand J score 7 and R score 10 at half weight
        self.assertEqual(hand_score(hand), 8.5)
        self.assertEqual(position_score(area, hand, [None]), 11.5)

    def test_given_reordered_hand_when_scoring_then_same_value(self):
        area = make_area({(0, 0): 'M4', (0, 1): 'O1'})
        hand = hand_of('W8', 'J1', 'M3', 'W2', 'C6', 'J7')
        base = position_score(area, hand, [])
        rng = random.Random(3)
        for _ in range(10):
            shuffled = list(hand)
            rng.shuffle(shuffled)
            self.assertEqual(position_score(area, shuffled, []), base)

    def test_given_custom_area_scorer_when_scoring_then_used_for_board(self):
        area = make_area({(0, 0): 'J1', (1, 0): 'J2'})

        def flat_scorer(a, species):
            return (1 if species == 'J' else 0), []

        self.assertEqual(position_score(area, [], [], area_scorer=flat_scorer), 1)


class TestShouldAccelerate(unittest.TestCase):
    def test_given_stronger_position_when_checking_then_accelerate(self):
        ours = make_area({(0, 0): 'J8', (1, 0): 'J7'})
        theirs = make_area({(0, 0): 'R2'})
        self.assertTrue(should_accelerate(ours, hand_of('C3'), [None, None], theirs))

    def test_given_equal_positions_when_checking_then_do_not_accelerate(self):
        area = make_area({(0, 0): 'J4'})
        self.assertFalse(should_accelerate(area, hand_of('R2'), [parse_card('W2')], area))

    def test_given_unknown_opponent_slots_when_checking_then_only_known_cards_count(self):
        ours = make_area({(0, 0): 'J4'})
        theirs = make_area({(0, 0): 'R3'})
        # ours: 4 + 0.5*2 = 5; theirs: 3 + 0.5*(1+1) = 4
        self.assertTrue(should_accelerate(ours, hand_of('C2'), [None, parse_card('W1'), None], theirs))
        # a known W8 lifts theirs to 3 + 0.5*(9+1+2) = 9
        self.assertFalse(should_accelerate(ours, hand_of('C2'), [parse_card('W8'), parse_card('W1')], theirs))


if __name__ == '__main__':
    unittest.main(verbosity=2)
