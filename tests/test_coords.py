import unittest

from hexclue.core.constants import DIRECTIONS, NORMALIZED_DIRECTIONS, Axis, Direction
from hexclue.core.exceptions import HexClueError, InvalidCoordinatesError
from hexclue.grid.coords import Position


class PositionTests(unittest.TestCase):
    def test_third_coordinate_is_derived(self) -> None:
        position = Position.from_coordinates((1, 2, -3))
        self.assertEqual(position.coordinates(), (1, 2, -3))
        self.assertEqual(position.z, -3)
        self.assertEqual(sum(Position(7, -2).coordinates()), 0)

    def test_invalid_triple_is_rejected(self) -> None:
        with self.assertRaises(InvalidCoordinatesError):
            Position.from_coordinates((1, 1, 1))
        with self.assertRaises(HexClueError):
            Position.from_coordinates((0, 0, 1))
        with self.assertRaises(ValueError):
            Position.from_coordinates((2, -1, 0))

    def test_arithmetic(self) -> None:
        a = Position.from_coordinates((1, 2, -3))
        b = Position.from_coordinates((0, 1, -1))
        self.assertEqual((a + b).coordinates(), (1, 3, -4))
        self.assertEqual((a - b).coordinates(), (1, 1, -2))
        self.assertEqual((-a).coordinates(), (-1, -2, 3))
        self.assertEqual((b * 3).coordinates(), (0, 3, -3))

    def test_axis_and_distance(self) -> None:
        position = Position.from_coordinates((3, -5, 2))
        self.assertEqual(position.axis(Axis.X), 3)
        self.assertEqual(position.axis(Axis.Y), -5)
        self.assertEqual(position.axis(Axis.Z), 2)
        self.assertEqual(position.distance(), 5)
        self.assertEqual(Position.zero().distance(), 0)

    def test_structural_equality_and_hashing(self) -> None:
        cells = {Position(1, -1): "a"}
        self.assertEqual(cells[Position.from_coordinates((1, -1, 0))], "a")
        self.assertEqual(Position(2, 3), Position(2, 3))
        self.assertNotEqual(Position(2, 3), Position(3, 2))


class DirectionTests(unittest.TestCase):
    def test_unit_steps_follow_axes(self) -> None:
        for direction in DIRECTIONS:
            unit = Position.unit(direction)
            self.assertEqual(unit.distance(), 1)
            self.assertEqual(unit.axis(direction.positive_axis), 1)
            self.assertEqual(unit.axis(direction.neutral_axis), 0)
            self.assertEqual(unit.axis(direction.negative_axis), -1)

    def test_xy_steps_from_x_to_y(self) -> None:
        self.assertEqual(Position.unit(Direction.XY).coordinates(), (1, -1, 0))
        self.assertEqual(Direction.XY.axes(), (Axis.X, Axis.Z, Axis.Y))

    def test_opposite_points_back(self) -> None:
        for direction in DIRECTIONS:
            self.assertEqual(Position.unit(direction.opposite()), -Position.unit(direction))
            self.assertEqual(direction.opposite().opposite(), direction)

    def test_normalize(self) -> None:
        self.assertEqual(Direction.YX.normalize(), Direction.XY)
        self.assertEqual(Direction.ZY.normalize(), Direction.YZ)
        self.assertEqual(Direction.XZ.normalize(), Direction.ZX)
        for direction in NORMALIZED_DIRECTIONS:
            self.assertEqual(direction.normalize(), direction)
            self.assertTrue(direction.is_normalized())
        for direction in DIRECTIONS:
            self.assertIn(direction.normalize(), NORMALIZED_DIRECTIONS)

    def test_rotation_cycle(self) -> None:
        order = [Direction.XY]
        for _ in range(5):
            order.append(order[-1].rotate())
        self.assertEqual(
            order,
            [Direction.XY, Direction.XZ, Direction.YZ, Direction.YX, Direction.ZX, Direction.ZY],
        )
        self.assertEqual(order[-1].rotate(), Direction.XY)

    def test_rotate_back_inverts_rotate(self) -> None:
        for direction in DIRECTIONS:
            self.assertEqual(direction.rotate().rotate_back(), direction)
            self.assertEqual(direction.rotate_back().rotate(), direction)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
