import unittest

from geometry_td.economy import Economy
from geometry_td.models import TowerType
from geometry_td.path import default_path
from geometry_td.placement import can_place, placement_problem
from geometry_td.tower import Tower


class TestEconomy(unittest.TestCase):
    def test_spend_and_earn(self):
        economy = Economy(money=100, lives=20)
        self.assertTrue(economy.spend(60))
        self.assertEqual(economy.money, 40)
        self.assertFalse(economy.spend(41))
        self.assertEqual(economy.money, 40)
        self.assertTrue(economy.spend(40))
        self.assertEqual(economy.money, 0)
        economy.earn(5)
        self.assertEqual(economy.money, 5)

    def test_negative_spend_rejected(self):
        economy = Economy(money=10)
        self.assertFalse(economy.spend(-5))
        self.assertEqual(economy.money, 10)

    def test_wave_clear_pays_reward_and_interest(self):
        economy = Economy(money=200)
        self.assertEqual(economy.award_wave_clear(), (50, 10))
        self.assertEqual(economy.money, 260)

    def test_interest_rounds_down(self):
        self.assertEqual(Economy(money=119).wave_bonus(), 5)

    def test_lives(self):
        economy = Economy(lives=1)
        self.assertFalse(economy.out_of_lives)
        economy.lose_life()
        self.assertTrue(economy.out_of_lives)


class TestPlacement(unittest.TestCase):
    def setUp(self):
        self.path = default_path()

    def test_open_ground_is_legal(self):
        self.assertTrue(can_place((440, 140), TowerType.BASIC, self.path, [], 120))

    def test_on_path_is_illegal(self):
        self.assertEqual(placement_problem((440, 80), TowerType.BASIC, self.path, [], 120), "too close to the path")
        self.assertFalse(can_place((440, 100), TowerType.BASIC, self.path, [], 120))

    def test_outside_inset_is_illegal(self):
        self.assertEqual(placement_problem((10, 140), TowerType.BASIC, self.path, [], 120), "out of bounds")
        self.assertFalse(can_place((440, 530), TowerType.BASIC, self.path, [], 120))

    def test_tower_spacing(self):
        towers = [Tower(1, 440, 140)]
        self.assertEqual(
            placement_problem((460, 140), TowerType.BASIC, self.path, towers, 120),
            "too close to another tower",
        )
        self.assertTrue(can_place((470, 140), TowerType.BASIC, self.path, towers, 120))

    def test_affordability(self):
        self.assertEqual(placement_problem((440, 140), TowerType.BASIC, self.path, [], 49), "not enough money")
        self.assertTrue(can_place((440, 140), TowerType.BASIC, self.path, [], 50))
        self.assertFalse(can_place((440, 140), TowerType.BEAM, self.path, [], 120))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
