"""Unit tests for ray-sphere intersection."""

import math

import numpy as np
import pytest

from tmath import DegenerateRayError, HitRecord, Point3, Ray, ScalarTypeError, Sphere, Vector3

T_MIN = 0.0001


class TestSphereHit:
    """Tests for Sphere.hit."""

    def test_hit_from_outside(self, unit_sphere_ahead):
        """A ray straight down -z hits the near side at t = 0.5."""
        ray = Ray(Point3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        rec = unit_sphere_ahead.hit(ray, T_MIN, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(0.5)
        assert rec.p == Point3(0.0, 0.0, -0.5)
        assert rec.normal == Vector3(0.0, 0.0, 1.0)
        assert rec.front_face is True

    def test_miss(self, unit_sphere_ahead):
        ray = Ray(Point3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0))
        assert unit_sphere_ahead.hit(ray, T_MIN, math.inf) is None

    def test_hit_from_inside_flips_normal(self, unit_sphere_ahead):
        """From the center, only the far root is valid and the normal faces back."""
        ray = Ray(Point3(0.0, 0.0, -1.0), Vector3(0.0, 0.0, -1.0))
        rec = unit_sphere_ahead.hit(ray, T_MIN, math.inf)
        assert rec.t == pytest.approx(0.5)
        assert rec.p == Point3(0.0, 0.0, -1.5)
        assert rec.front_face is False
        assert rec.normal == Vector3(0.0, 0.0, 1.0)

    def test_normal_faces_ray(self, unit_sphere_ahead, rng):
        """The stored normal always points against the incoming direction."""
        for _ in range(50):
            direction = Vector3(0.0, 0.0, -1.0) + Vector3.random_range(-0.3, 0.3, rng=rng)
            ray = Ray(Point3(0.0, 0.0, 0.0), direction)
            rec = unit_sphere_ahead.hit(ray, T_MIN, math.inf)
            if rec is not None:
                assert ray.direction.dot(rec.normal) < 0
                assert rec.normal.length() == pytest.approx(1.0)

    def test_far_root_when_near_root_below_t_min(self, unit_sphere_ahead):
        ray = Ray(Point3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        rec = unit_sphere_ahead.hit(ray, 0.6, math.inf)
        assert rec.t == pytest.approx(1.5)
        assert rec.front_face is False

    def test_both_roots_outside_range(self, unit_sphere_ahead):
        ray = Ray(Point3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert unit_sphere_ahead.hit(ray, T_MIN, 0.4) is None
        assert unit_sphere_ahead.hit(ray, 1.6, math.inf) is None

    def test_range_is_inclusive(self, unit_sphere_ahead):
        ray = Ray(Point3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert unit_sphere_ahead.hit(ray, T_MIN, 0.5).t == 0.5

    def test_sphere_behind_ray(self, unit_sphere_ahead):
        ray = Ray(Point3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0))
        assert unit_sphere_ahead.hit(ray, T_MIN, math.inf) is None

    def test_unnormalized_direction(self, unit_sphere_ahead):
        """t scales with the direction length; the point does not."""
        ray = Ray(Point3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -2.0))
        rec = unit_sphere_ahead.hit(ray, T_MIN, math.inf)
        assert rec.t == pytest.approx(0.25)
        assert rec.p == Point3(0.0, 0.0, -0.5)

    def test_float32_sphere(self):
        sphere = Sphere(Point3(0, 0, -1, dtype=np.float32), 0.5)
        ray = Ray(Point3(0, 0, 0, dtype=np.float32), Vector3(0, 0, -1, dtype=np.float32))
        rec = sphere.hit(ray, T_MIN, math.inf)
        assert rec.t == pytest.approx(0.5)
        assert rec.p.dtype == np.float32

    def test_zero_direction_raises(self, unit_sphere_ahead):
        ray = Ray(Point3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 0.0))
        with pytest.raises(DegenerateRayError):
            unit_sphere_ahead.hit(ray, T_MIN, math.inf)
        with pytest.raises(ZeroDivisionError):
            unit_sphere_ahead.hit(ray, T_MIN, math.inf)


class TestSphereValue:
    """Tests for sphere construction and immutability."""

    def test_center_cannot_be_mutated(self):
        center = Point3(0.0, 0.0, -1.0)
        sphere = Sphere(center, 0.5)
        center[0] = 5.0
        sphere.center[1] = 7.0
        assert sphere.center == Point3(0.0, 0.0, -1.0)

    def test_equality_and_hash(self):
        a = Sphere(Point3(1.0, 2.0, 3.0), 2.0)
        b = Sphere(Point3(1.0, 2.0, 3.0), 2.0)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Sphere(Point3(1.0, 2.0, 3.0), 1.0)

    def test_integer_center_rejected(self):
        with pytest.raises(ScalarTypeError):
            Sphere(Point3(0, 0, 0, dtype=np.int32), 1)


class TestHitRecord:
    """Tests for HitRecord face-normal orientation."""

    def test_front_face(self):
        rec = HitRecord()
        ray = Ray(Point3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        rec.set_face_normal(ray, Vector3(0.0, 0.0, 1.0))
        assert rec.front_face is True
        assert rec.normal == Vector3(0.0, 0.0, 1.0)

    def test_back_face(self):
        rec = HitRecord()
        ray = Ray(Point3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        rec.set_face_normal(ray, Vector3(0.0, 0.0, -1.0))
        assert rec.front_face is False
        assert rec.normal == Vector3(0.0, 0.0, 1.0)

    def test_copy_is_independent(self):
        rec = HitRecord(p=Point3(1.0, 2.0, 3.0), normal=Vector3(0.0, 1.0, 0.0), t=2.0)
        other = rec.copy()
        other.t = 3.0
        assert rec.t == 2.0
        assert other.p == rec.p
        other.p[0] = 42.0
        other.normal[1] = -1.0
        assert rec.p == Point3(1.0, 2.0, 3.0)
        assert rec.normal == Vector3(0.0, 1.0, 0.0)

    def test_copy_of_empty_record(self):
        assert HitRecord().copy() == HitRecord()
