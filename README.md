# vang

`vang` is the core of a small voxel engine, written in plain Python with no
dependencies outside the standard library. It needs Python 3.10 or newer.

## What is in it

- **Voxel storage**: `vang.chunk`
  - `Chunk` holds a 64×64×64 grid of `Blocks`.
  - `greedy_cuboid_compilation()` packs runs of equal blocks into cuboids. Each
    cuboid is at most 32 cells along each axis.
  - `get_cuboid()` returns the packed word of one cell. The word holds the
    cell's distance to each face of its cuboid.
  - `all_blocks` returns the block values and the cuboid words interleaved.
- **Worlds**: `vang.world`
  - `World` creates chunks the first time they are used.
  - `world_to_chunk_coord` and `world_to_block_coord` convert world positions to
    chunk and block coordinates.
  - `get_block` returns `Blocks.NONE` outside the range 0–576 on any axis.
- **Universes**: `vang.universe`
  - `Universe` holds worlds, addressed by the id that `create_world()` returns.
  - `create_universe(seed)` creates a universe and makes it the current one.
  - `get_current_universe()` returns the current universe.
- **Raycasting**: `vang.vmath`
  - `raycast(world, origin, direction, max_distance)` steps block by block along
    the ray.
  - It stops at the first block that is neither `AIR` nor `FOG`.
  - It returns a `RaycastResult` with these fields: `hit`, `block_hit`,
    `block_hit_position`, `new_block_vector` (the step that entered that block),
    and `distance`.
- **Items**: `vang.items`
  - `ItemBlueprint` and `BlockBlueprint` are each owned by a `vang.mods.Mod`. An
    `ItemBlueprint` defaults to `Unusable`. A `BlockBlueprint` defaults to
    `Placeable`.
  - `Item` and `Block` are stacks. `increment_amount` keeps the stack between 0
    and the blueprint's `max_stack`.
- **Blueprint registry**: `vang.blueprints.BlueprintContainer`
  - It stores blueprints under numeric ids.
  - `get_blueprint_id` looks an id up by the full technical name (`"Mod::Name"`).
  - `set_blueprint_id` swaps the ids of two blueprints.
- **Runtime pieces**:
  - `vang.events`: typed events, `EventDispatcher` and `EventHandler`.
  - `vang.layers`: `Layer` and `LayerStack`. Layers update bottom-up and receive
    events top-down.
  - `vang.lights`: `LightManager`, which tracks dirty flags.
  - `vang.entities`: `EntityManager`, which tracks dirty flags.
  - `vang.input`: the `Key` and `Mouse` codes and the `InputCache` interface.
  - `vang.camera`: `Camera`.
  - `vang.player`: `Player`.
  - `vang.rendering`: `ChunkRenderer`.
  - `vang.structure`: a cellular-automaton cave generator.
- **Engine**: `vang.engine.Engine` owns all of the runtime pieces and runs one
  frame per `update()`. `vang.demo` adds a sample game on top of it:
  - `PlayerMovementLayer` handles movement, building and breaking blocks, and a
    headlight.
  - `populate_world` builds a floor, a ceiling, a tower, a cave and two lights.
  - `animate_lights` moves the two lights around an orbit.
- **Utilities**:
  - `vang.log`: levelled, coloured logging. `fatal` raises `FatalError`.
  - `vang.timing`: frame timing and uptime.
  - `vang.fileio`: `read_file` and `FileWriter`, which can be used as a context
    manager.

## Examples

```python
from vang.chunk import Blocks
from vang.world import World
from vang.vmath import raycast

world = World()
world.set_block(3, 0, 4, Blocks.GREEN)
assert world.get_block(3, 0, 4) is Blocks.GREEN

result = raycast(world, (3.0, 5.0, 4.0), (0.0, -1.0, 0.0), 10.0)
if result.hit:
    print(result.block_hit, result.block_hit_position)
```

```python
from vang.blueprints import BlueprintContainer
from vang.items import ItemBlueprint
from vang.mods import Mod

mod = Mod("Default")
container = BlueprintContainer()
container.add_blueprint(ItemBlueprint(mod, "Test_Item", "Test Item"))

blueprint_id = container.get_blueprint_id("Default::Test_Item")
print(container.get_blueprint(blueprint_id).display_name)
```

Some calls raise exceptions:

- `add_blueprint` raises `vang.log.FatalError` for a duplicate full name.
- `get_blueprint` raises `vang.log.FatalError` for an id that is out of range.
- `set_blueprint_id` raises `IndexError` for an id that is out of range.
- `set_blueprint_id` raises `KeyError` for an unknown name.

```python
import random
from vang.structure import make_dungeon

cells = make_dungeon(32, 32, 45, 8, 5, 4, random.Random(1))
```

Running the engine with the sample layer:

```python
from vang.demo import PlayerMovementLayer
from vang.engine import Engine

engine = Engine("Sample")
engine.initialize()
engine.layer_stack.push_layer(PlayerMovementLayer(engine))
for _ in range(10):
    engine.update()
engine.close()
engine.update()
```

## What it does not do

The package has no display, no GPU rendering and no real input devices.

- `vang.engine.Window` queues events such as `resize` and `request_close`, and
  delivers them on `update()`.
- `vang.engine.GraphicsAPI` records the viewport, the frame count and the last
  camera it was shown. It does not draw anything.
- By default the engine's input reports nothing pressed. To drive it, pass your
  own `InputCache`, `Window` or `GraphicsAPI` to `Engine`.

There is no command-line entry point. Worlds are not saved to disk.

## Tests

The tests use pytest. Install the `test` extra and run `pytest`.