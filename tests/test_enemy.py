import unittest

from geometry_td.enemy import Enemy
from geometry_td.models import EnemyVariant, SpawnRecord, TowerType


class TestEnemyDamage(unittest.TestCase):
    def test_two_basic_hits_kill_fresh_wave_one_enemy(self):
        enemy = Enemy(1, 24, 70)
        self.assertFalse(enemy.take_damage(12, TowerType.BASIC))
        self.assertEqual(enemy.hp, 12)
        self.assertTrue(enemy.take_damage(12, TowerType.BASIC))
        self.assertFalse(enemy.alive)

    def test_dead_enemy_dies_only_once(self):
        enemy = Enemy(1, 10, 70)
        self.assertTrue(enemy.take_damage(50, TowerType.BASIC))
        self.assertFalse(enemy.take_damage(50, TowerType.BASIC))

    def test_armor_resists_basic_towers_only(self):
        enemy = Enemy(1, 100, 60, EnemyVariant.ARMORED)
        enemy.take_damage(12, TowerType.BASIC)
        self.assertAlmostEqual(enemy.hp, 100 - 4.8)
        enemy.take_damage(12, TowerType.SPLASH)
        self.assertAlmostEqual(enemy.hp, 100 - 4.8 - 12)


class TestEnemyRewards(unittest.TestCase):
    def test_reward_floor(self):
        self.assertEqual(Enemy(1, 24, 70).kill_reward(), 5)

    def test_reward_scales_with_max_hp(self):
        self.assertEqual(Enemy(1, 400, 70).kill_reward(), 20)

    def test_boss_reward_is_flat(self):
        self.assertEqual(Enemy(1, 24, 70, EnemyVariant.BOSS).kill_reward(), 250)


class TestEnemyMovement(unittest.TestCase):
    def test_from_spawn_record(self):
        enemy = Enemy.from_spawn(7, SpawnRecord(hp=50, speed=60, variant=EnemyVariant.ARMORED))
        self.assertEqual(enemy.id, 7)
        self.assertEqual(enemy.max_hp, 50)
        self.assertIs(enemy.variant, EnemyVariant.ARMORED)
        self.assertEqual(enemy.radius, 16)

    def test_leak_clamps_at_exit(self):
        enemy = Enemy(1, 24, 70)
        self.assertFalse(enemy.advance(1.0, 100))
        self.assertEqual(enemy.s, 70)
        self.assertTrue(enemy.advance(1.0, 100))
        self.assertEqual(enemy.s, 100)
        self.assertTrue(enemy.leaked)
        self.assertFalse(enemy.alive)
        self.assertFalse(enemy.advance(1.0, 100))

    def test_grace_period(self):
        enemy = Enemy(1, 24, 70)
        enemy.take_damage(100, TowerType.BASIC)
        self.assertFalse(enemy.is_expired())
        enemy.advance(0.1, 100)
        self.assertFalse(enemy.is_expired())
        enemy.advance(0.2, 100)
        self.assertTrue(enemy.is_expired())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
