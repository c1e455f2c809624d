# minirt

A small ray tracer library. It traces one ray per pixel through a scene of
spheres, planes (or discs), finite cylinders and finite cones, with ambient,
diffuse and specular (Phong) lighting, hard shadows from point lights, and
mirror reflections. Surfaces can be a solid colour, a checkerboard or an image
texture, and spheres and planes can carry a bump map. The rendered pixels can
be written to any image format Pillow supports.

## Installing

```
pip install .
```

## Building and rendering a scene

Scenes are built in code from the dataclasses in `minirt.scene`. Colours are
packed `0xRRGGBB` integers. A scene needs an `Ambient` and a `Camera` before it
is rendered.

```python
from minirt.scene import (
    Ambient, Camera, Light, Material, Plane, Properties, Scene, Sphere,
    Texture, TextureKind,
)
from minirt.vector import Vec3
from minirt.render import render, save_image

scene = Scene(
    ambient=Ambient(ratio=0.2, color=0xFFFFFF),
    camera=Camera(position=Vec3(0, 0, -10), orientation=Vec3(0, 0, 1), fov=70),
    lights=[Light(position=Vec3(-10, 10, -10), ratio=0.7, color=0xFFFFFF)],
    spheres=[
        Sphere(
            center=Vec3(0, 0, 0),
            diameter=4,
            properties=Properties(
                material=Material(diffuse=0.9, specular=0.5, shininess=32,
                                  reflectivity=0.2),
                texture=Texture(primary=0xC82828),
            ),
        )
    ],
    planes=[
        Plane(
            point=Vec3(0, -2, 0),
            normal=Vec3(0, 1, 0),
            properties=Properties(
                texture=Texture(kind=TextureKind.CHECKER, scale=0.5,
                                primary=0x787878, secondary=0x1E1E1E),
            ),
        )
    ],
)

pixels = render(scene, 320, 240, lambda percent: print(f"{percent}%"))
save_image(pixels, 320, 240, "scene.png")
```

`render(scene, width, height, progress)` returns the image as a row-major list
of packed colours; width and height default to 800 by 600. If `progress` is
given it is called after each row with the percentage of rows done so far.
Reflections are followed to a depth of 20. `save_image` raises `ValueError`
when the number of pixels does not match the size, and picks the file format
from the path's suffix.

## Modules

- `minirt.vector` — `Vec3` (with `dot`, `cross`, `length`, `normalized` and
  arithmetic operators), `Ray` (`at`), `HitRecord`, `reflect`, `face_normal`.
- `minirt.scene` — `Scene`, `Ambient`, `Camera`, `Light`, `Sphere`, `Plane`,
  `Cylinder`, `Cone`, and the look of an object: `Properties`, `Material`,
  `Texture`, `TextureKind`, `BumpMap`. Image textures and bump maps hold their
  pixels as a row-major list of packed colours in `data`.
- `minirt.shapes` — ray distances, nearest hits and hit records for spheres,
  planes and cylinders; a miss is reported as `-1.0` by the distance functions
  and as `None` by the `closest_*` functions.
- `minirt.cone` — the same for cones.
- `minirt.surface` — `sphere_uv`, `plane_uv`, `checker_color`,
  `texture_color` and `bump_normal`.
- `minirt.lighting` — colour packing (`pack_rgb`, `unpack_rgb`, saturating
  `add_rgb`) and the `ambient_color`, `diffuse_color`, `specular_color` and
  `background_color` terms.
- `minirt.tracer` — `closest_intersection`, `shadow_ray`, `in_shadow`,
  `reflection_color` and `ray_color`.
- `minirt.render` — `primary_ray`, `render` and `save_image`.

## What it does not do

The package has no reader for scene description files and no command-line
program: scenes are put together in Python as shown above, and images are
written with `save_image`. It does not open a window to display the result.