import pytest

from minirt.lighting import background_color
from minirt.scene import (
    Ambient,
    Camera,
    Cone,
    Cylinder,
    Light,
    Material,
    Plane,
    Properties,
    Scene,
    Sphere,
    Texture,
    TextureKind,
)
from minirt.tracer import (
    Intersection,
    closest_intersection,
    in_shadow,
    ray_color,
    reflection_color,
    shadow_ray,
)
from minirt.vector import HitRecord, Ray, Vec3


def _props(color, **material):
    return Properties(material=Material(**material), texture=Texture(primary=color))


def _scene(ambient_ratio=1.0, lights=None):
    return Scene(
        ambient=Ambient(ratio=ambient_ratio, color=0xFFFFFF),
        camera=Camera(position=Vec3(0, 0, -10), orientation=Vec3(0, 0, 1), fov=70),
        lights=lights if lights is not None else [Light(Vec3(0, 10, 0), 0.0, 0xFFFFFF)],
    )


FORWARD = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))


def test_no_objects_gives_no_intersection():
    assert closest_intersection(FORWARD, _scene()) is None


def test_sphere_intersection_details():
    scene = _scene()
    sphere = Sphere(center=Vec3(0, 0, 0), diameter=2, properties=_props(0x336699))
    scene.spheres.append(sphere)
    info = closest_intersection(FORWARD, scene)
    assert info.hit.t == pytest.approx(4.0)
    assert info.color == 0x336699
    assert info.properties is sphere.properties


def test_nearest_object_wins():
    scene = _scene()
    scene.spheres.append(Sphere(center=Vec3(0, 0, 0), diameter=2, properties=_props(0x112233)))
    scene.planes.append(
        Plane(point=Vec3(0, 0, 5), normal=Vec3(0, 0, 1), properties=_props(0x445566))
    )
    assert closest_intersection(FORWARD, scene).color == 0x112233
    scene.planes[0].point = Vec3(0, 0, -3)
    assert closest_intersection(FORWARD, scene).color == 0x445566


def test_checker_texture_colours_plane():
    scene = _scene()
    texture = Texture(kind=TextureKind.CHECKER, scale=1.0, primary=0xFF0000, secondary=0x00FF00)
    scene.planes.append(
        Plane(point=Vec3(0, 0, 0), normal=Vec3(0, 0, 1), properties=Properties(texture=texture))
    )
    colours = {
        closest_intersection(Ray(Vec3(x * 0.7, 0, -5), Vec3(0, 0, 1)), scene).color
        for x in range(-20, 20)
    }
    assert colours == {0xFF0000, 0x00FF00}


def test_cylinder_and_cone_use_primary_colour():
    scene = _scene()
    scene.cylinders.append(
        Cylinder(center=Vec3(0, 0, 0), axis=Vec3(0, 1, 0), diameter=2, height=2,
                 properties=_props(0xABCDEF))
    )
    assert closest_intersection(FORWARD, scene).color == 0xABCDEF
    scene.cylinders.clear()
    scene.cones.append(
        Cone(center=Vec3(0, -1, 0), axis=Vec3(0, 1, 0), height=3, diameter=4,
             properties=_props(0x123456))
    )
    info = closest_intersection(FORWARD, scene)
    assert info.color == 0x123456
    assert info.hit.t > 0


def test_shadow_ray_starts_off_surface():
    ray = shadow_ray(Vec3(0, 0, 0), Vec3(0, 10, 0), Vec3(0, 1, 0))
    assert ray.origin.y == pytest.approx(0.001)
    assert ray.direction == Vec3(0, 1, 0)


def test_in_shadow():
    scene = _scene()
    ray = Ray(Vec3(0, 0, -5), Vec3(0, 0, 1))
    assert not in_shadow(ray, 10.0, scene)
    scene.spheres.append(Sphere(center=Vec3(0, 0, 0), diameter=2))
    assert in_shadow(ray, 10.0, scene)
    assert not in_shadow(ray, 3.0, scene)


def test_miss_gives_background():
    direction = Vec3(0, 0.5, 1)
    assert ray_color(Ray(Vec3(), direction), _scene(), 5) == background_color(
        direction.normalized()
    )


def test_full_ambient_returns_object_colour():
    scene = _scene()
    scene.spheres.append(Sphere(center=Vec3(0, 0, 0), diameter=2, properties=_props(0x336699)))
    assert ray_color(FORWARD, scene, 5) == 0x336699


def test_blocked_light_leaves_dark_surface():
    light = Light(position=Vec3(0, 0, -10), ratio=1.0, color=0xFFFFFF)
    scene = _scene(ambient_ratio=0.0, lights=[light])
    scene.spheres.append(Sphere(center=Vec3(0, 0, 0), diameter=2, properties=_props(0x808080)))
    assert ray_color(FORWARD, scene, 0) == 0x808080
    scene.spheres.append(Sphere(center=Vec3(0, 0, -8), diameter=1, properties=_props(0x808080)))
    assert ray_color(FORWARD, scene, 0) == 0


def _mirror_scene():
    scene = _scene()
    scene.planes.append(
        Plane(point=Vec3(0, 0, 0), normal=Vec3(0, 1, 0),
              properties=_props(0x404040, reflectivity=1.0))
    )
    return scene


def test_reflection_depth_rules():
    scene = _mirror_scene()
    down = Ray(Vec3(0, 5, 0), Vec3(0, -1, 0))
    assert ray_color(down, scene, 0) == 0x404040
    assert ray_color(down, scene, 1) == 0x404040
    assert ray_color(down, scene, 2) == background_color(Vec3(0, 1, 0))


def test_reflection_color_without_reflectivity_or_depth():
    hit = HitRecord(t=1.0, point=Vec3(0, 0, 0), normal=Vec3(0, 1, 0))
    flat = Intersection(hit=hit, properties=_props(0x202020), color=0x202020)
    down = Ray(Vec3(0, 5, 0), Vec3(0, -1, 0))
    assert reflection_color(flat, down, _scene(), 3) == 0x202020
    shiny = Intersection(hit=hit, properties=_props(0x202020, reflectivity=1.0), color=0x202020)
    assert reflection_color(shiny, down, _scene(), 0) == 0x202020
    assert reflection_color(shiny, down, _scene(), 3) == background_color(Vec3(0, 1, 0))