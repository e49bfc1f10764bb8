# raycfg

A small path tracer. It reads a scene description in libconfig syntax (a file
whose name contains `.cfg`) and renders it to a binary PPM (P6) image.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Rendering a scene

```
raycfg scenes/example.cfg
```

The scene's camera and light settings are printed, the image is traced and
written to `screenshots/example.ppm` (the `screenshots` directory is created
if it does not exist). `raycfg --help` prints the usage line.

The command exits with status 84 when it is given the wrong number of
arguments, a file name without `.cfg`, a file that cannot be read or parsed,
or a scene missing its `lights.point` list or `primitives` list. Pressing
Ctrl-C stops the run with status 0.

While rendering, the file `./scenes/<name>.cfg` that matches the output name
is watched; if its modification time changes before the image is saved, that
file is loaded and the scene is rendered again.

## Scene files

A scene holds three sections:

```
camera = {
    resolution = { width = 400; height = 200; };
    position = { x = 0; y = 0; z = 1; };
    rotation = { x = 0; y = 0; z = 0; };
    fieldOfView = 90.0;
    depthOfField = 0.0;
    quality = 100;
};

lights = {
    skycolor = { r = 255; g = 255; b = 255; };
    point = (
        { x = 0.0; y = 5.0; z = -1.0; color = { r = 255; g = 255; b = 255; }; intensity = 1.0; }
    );
};

primitives = (
    { type = "sphere"; x = 0.0; y = 0.0; z = -1.0; radius = 0.5;
      color = { r = 255; g = 0; b = 0; }; texture = "color"; material = "lambertian"; }
);
```

Settings are read by type: resolution, position, rotation, quality and colour
channels are integers; `fieldOfView`, `depthOfField`, coordinates, `radius`,
`height`, `length`, `width` and `intensity` are decimals. A setting written
with the other type is ignored and its default is used.

- `quality` is the number of samples per pixel (default 100).
- Colour channels are divided by 255 with integer division, so a channel is
  either fully on (255) or off (anything lower).
- The camera looks from its `position` toward (0, 0, -1) with a fixed lens
  aperture of 0.1; `rotation` and `depthOfField` are read and printed but do
  not change the image.
- Primitive types: `sphere`, `cylinder`, `planes`, `cone`, `triangles` (the
  last using `point1`, `point2`, `point3`, each with `x`, `y`, `z`). Short
  forms `sp`, `cy`, `pl`, `co`, `tr` are accepted too; an unknown type gives
  an empty sphere.
- Textures: `color`, `chess`, `image` (with `texturePatch` naming the image
  file, read with Pillow). Any other name gives a magenta and black checker.
- Materials: `lambertian` (the default), `metal`, `dielectric`, `light`.
- Each light point becomes a glowing sphere whose radius is its `intensity`.

## Using it as a library

```python
from raycfg.parsing import load_scene
from raycfg.render import Renderer, output_name

scene = load_scene("scenes/example.cfg")
print(scene.dump())
path = Renderer().render(scene, output_name("scenes/example.cfg"))
```

`Renderer.render_pixels(scene)` returns a `raycfg.ppm.PpmImage` without
saving it; `PpmImage.to_bytes()` gives the whole PPM file.

Scene files can also be read without rendering: `raycfg.config.load_config`
and `parse_config` return a `Config` whose `lookup("a.b.[0].c")` and
`lookup_value(path, default)` reach any setting.

Geometry, materials and textures live in `raycfg.vec3`, `raycfg.ray`,
`raycfg.objects`, `raycfg.materials` and `raycfg.textures`; objects can be
built from a `raycfg.builder.PrimitiveSpec` with `build_primitive`, and
lights with `create_light`.

## What it does not do

There is no preview window: the image only exists as the saved PPM file.
Rendering runs on a single thread, so high resolutions or quality settings
take a long time.