import pytest

from minirt.vector import HitRecord, Ray, Vec3, face_normal, reflect


def test_arithmetic_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a
    assert (a * 2) / 2 == a
    assert -(-a) == a
    assert 3 * a == a * 3


def test_cross_of_unit_axes():
    assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)
    assert Vec3(0, 1, 0).cross(Vec3(1, 0, 0)) == Vec3(0, 0, -1)


def test_cross_is_orthogonal_to_inputs():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-12)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-12)


def test_dot_with_self_is_squared_length():
    a = Vec3(3.0, -1.0, 2.0)
    assert a.dot(a) == pytest.approx(a.length() ** 2)


def test_normalized_has_unit_length_and_same_direction():
    a = Vec3(3.0, 4.0, 12.0)
    n = a.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.cross(a).length() == pytest.approx(0.0, abs=1e-12)
    assert n.dot(a) > 0


def test_normalized_zero_vector_stays_zero():
    assert Vec3().normalized() == Vec3(0.0, 0.0, 0.0)


def test_iteration_yields_components():
    assert list(Vec3(1.0, 2.0, 3.0)) == [1.0, 2.0, 3.0]


def test_ray_at():
    ray = Ray(Vec3(1, 1, 1), Vec3(0, 0, 1))
    assert ray.at(0) == ray.origin
    assert ray.at(2.5) == Vec3(1, 1, 3.5)


def test_reflect_preserves_length_and_flips_normal_component():
    incident = Vec3(1.0, -1.0, 0.0)
    normal = Vec3(0.0, 1.0, 0.0)
    out = reflect(incident, normal)
    assert out.length() == pytest.approx(incident.length())
    assert out.dot(normal) == pytest.approx(-incident.dot(normal))
    assert out.x == incident.x


def test_face_normal_faces_the_ray():
    outward = Vec3(0.0, 0.0, 1.0)
    towards = Ray(Vec3(), Vec3(0.0, 0.0, -1.0))
    away = Ray(Vec3(), Vec3(0.0, 0.0, 1.0))
    assert face_normal(towards, outward) == outward
    assert face_normal(away, outward) == -outward


def test_hit_record_defaults_and_mutation():
    record = HitRecord()
    assert record.t == 0.0
    assert record.normal == Vec3()
    record.normal = Vec3(0, 1, 0)
    assert record.normal == Vec3(0, 1, 0)
    assert HitRecord().normal == Vec3()


def test_vec3_is_immutable():
    v = Vec3(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5
    assert v.x == 1
    assert v == Vec3(1, 2, 3)