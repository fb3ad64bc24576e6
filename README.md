# daedalusview

`daedalusview` holds the display logic of a small 3D part viewer as plain
Python data. It builds meshes, holds form state, computes light uniforms and
drives screen flow. It draws nothing itself. A renderer reads what the package
produces and draws it.

The package has no runtime dependencies. Its tests use pytest
(`pip install .[test]`, then `pytest`).

## Modules

### `daedalusview.model`

This module holds the shared data types.

- Colours and geometry:
  - `Color`, an RGBA colour. `Color.scaled(factor)` multiplies the RGB
    channels, clamps them to 0–255 and keeps alpha.
  - `ColorPalette`, which holds the colours `white`, `black`, `light`,
    `dark`, `accent1` and `accent2`.
  - `Rect`. `Rect.contains(x, y)` excludes the right and bottom edges.
  - `Vector3`.
- Parts:
  - `Material`, with a name, a density, a colour and an optional texture.
  - `Position`. `Position.at(pmt)` returns `constant + meter * pmt`.
  - `Dimensions`, with the sizes, the wall `thickness` and `facing`
    (`"x"`, `"y"` or `"z"`).
  - `Shape`, one of `RECTANGLE`, `CYLINDER` or `SPHERE`.
  - `SceneObject`.
- Forms and screens:
  - `TextBox`. `TextBox.set_text` also moves the cursor to the end.
  - `GuiResult`, `Screen` and `Key`.
- Input:
  - `InputState`, a snapshot of one frame's input. Use its `key_pressed`,
    `key_down` and `chord` methods. `chord` is true when left control is held
    and the key is pressed.

### `daedalusview.widgets`

- `Button`:
  - `press()` darkens the button and `release()` restores it.
  - `poll(inputs)` updates the hover and pressed state and returns `True`
    when the button fires. A momentary button fires on release over the
    button. A toggle button fires on each click.
  - `fit_text(measure)` shrinks the caption in steps of 2 until it fits,
    then centres it. It returns a `TextLayout`.
- `make_button(rect, text, color, theme)` picks a caption colour that
  contrasts with the fill.
- `wrap_text(text, row_count)` splits text into rows. A row ends at a newline
  or after 31 characters. It returns at most `row_count` rows.

### `daedalusview.lights`

- `LightSet.create(...)` hands out shader slots, up to `max_lights` (4 by
  default). Once every slot is taken it returns a disabled `Light` with no
  slot.
- `Light.uniforms()` maps uniform names such as `lights[0].color` to the
  values sent for that light.

### `daedalusview.config`

`parse_config(text, header_size)` and `load_config(path, header_size)` read
four settings that come after a header: the window size, the window mode, the
logo flag and the theme index. Both return a `DisplayConfig`. They raise
`ConfigError` when a file is unreadable, incomplete or malformed, or gives a
zero size.

### `daedalusview.meshing`

- `MeshBuilder.add_vertex` adds one vertex.
- `MeshBuilder.plane` adds an axis-aligned quad made of two triangles.
- `MeshBuilder.build` returns an immutable `Mesh`.
- `gen_rect_tube(obj)` builds the 32-triangle hollow rectangular tube for an
  object facing x, y or z.

### `daedalusview.roundtube`

`gen_round_tube(obj)` builds a pipe with 32 quads per ring.

- The length is cut into whole-unit slices.
- It has outer and inner walls and both end caps.
- For facing x the radius is `y_height`. For facing y or z it is `x_length`.
- It raises `ValueError` for an unknown facing or a zero radius.

### `daedalusview.modelling`

- `model_object(obj)` chooses a `MeshKind`:
  - solid boxes are cubes and hollow boxes are rectangular tubes;
  - solid cylinders are cylinders and hollow cylinders are round tubes;
  - everything else is a sphere.

  It returns a `ModelSpec` with the parameters or mesh, the rotation and the
  translation, and also stores it on `obj.model`.
- `draw_offset(obj, pmt)` returns where the model is drawn.
- `cylinder_outline(obj, pmt)` lists the end circles of a cylinder. Hollow
  cylinders list their inner rings first.

### Editing forms

Each form has `update(inputs)`, which returns a `GuiResult`.

- Tab moves the focus to the next text box.
- Ctrl+S, Ctrl+A and Ctrl+D save, cancel and delete.

The three forms are:

- **`daedalusview.objectform.ObjectForm`**
  - Ctrl+T and the type button cycle the shape.
  - Ctrl+F and the facing button cycle the facing.
  - Ctrl+M and the material button switch between a named material and a
    plain weight.
  - `to_object(materials)` reads the boxes into a `SceneObject`. Unreadable
    positions become 0 and non-positive sizes become 1.
  - `load_object(obj)` fills the boxes from an object.
- **`daedalusview.materialform.MaterialForm`**
  - `to_material(materials)` reads the boxes into a `Material`. A material
    that the form is not already editing is appended to `materials`.
  - `load_material` fills the boxes from a material.
  - `reset` restores the placeholders.
- **`daedalusview.colorform.ColorForm`**
  - It has 18 channel boxes, three for each palette colour.
  - `to_palette()` and `load_palette(palette)` read and fill them.
  - The select button returns `GuiResult.CHANGE_THEME`.

### `daedalusview.screens`

`ScreenManager` drives a mapping of `Screen` to `ScreenHandler`.

- `change_to` switches screens at once.
- `transition_to` and `update_transition` perform a fade. The screens are
  swapped at full black.
- `frame(inputs, close_requested)` runs one frame. It also handles the Y/N
  exit prompt, and returns `True` when the settings screen asks for a restart.
- `close()` unloads the current screen.

## What the package does not do

- It does not open a window or render anything.
- It has no command to run.
- It does not provide the actual screens (logo, title, settings, project,
  materials). `ScreenHandler` is only a base class to build them on.
- It does not load or save projects, material lists or themes. Forms read and
  write in-memory objects only.