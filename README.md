# pokerush

A small game for the terminal. You and a computer opponent each build an
obstacle course for a Pokémon. The aim is not to win a race: both Pokémon
have to reach the finish line **at the same time**. The closer the two
finishing times are, the higher your score out of 100.

Everything is drawn with 24-bit ANSI colours, so use a terminal that supports
true colour and is at least 90 columns by 30 rows.

## Installing

```
pip install .
```

The package needs nothing beyond the Python standard library (Python 3.10 or
newer).

## Playing

```
pokerush
pokerush --pokemones ruta/a/pokemones.csv --sprites ruta/a/sprites
```

By default the game reads, from the current directory:

- `pokemones_juego.csv` (`--pokemones`): one Pokémon per line in the form
  `nombre,fuerza,destreza,inteligencia`, for example `Pikachu,3,5,2`.
  Names are stored with a capital first letter and the rest in lower case.
  At least two Pokémon are needed to play a race.
- `sprites/` (`--sprites`): images in uncompressed 24-bit BMP format. Each
  file's name up to its first dot is the sprite's name. Files that are not
  such images are skipped, and a missing sprite is simply not drawn. Pure
  green, `(0, 255, 0)`, is treated as transparent. The names the game looks
  for are:
  - each Pokémon's name, with `pokemon_default` used in the Pokédex when a
    Pokémon has no sprite of its own;
  - `logo_front`, `logo_back`, `pokeball`, `jugador`;
  - the opponents `Brock`, `Misty`, `Red`, `Cynthia`;
  - the race: `pista1` to `pista4`, `meta`, `pared`, `tunel_front`,
    `tunel_back`, `puerta_cerrada`, `puerta_abierta_front`,
    `puerta_abierta_back`, `escombros_front`, `escombros_back`, and the
    countdown `three`, `two`, `one`.

When the game ends it prints why (a normal exit, a terminal that is too
small, a Pokémon file that could not be read, an interruption, and so on)
and the command exits with that state's number, 0 for a normal exit.

### Controls

- Arrow keys move through menus and change the selected option.
- Enter confirms.
- Letter shortcuts are shown on screen: in the main menu `J` to play, `P`
  for the Pokédex, `T` for the tutorial, `I` for information; when choosing
  an opponent `F`, `M`, `D` or `I`; `R` to retry on the score screen; `Q`
  to go back or to quit from the main menu.
- Tab shows the time each frame took.
- Ctrl+C stops the game and restores the terminal.

### How a course is timed

Each obstacle is one of strength (`F`), dexterity (`D`) or intelligence
(`I`). Crossing one takes 10 time units minus the Pokémon's matching
attribute, never less than zero. In a run of identical obstacles each one
after the first takes one unit less than the one before.

The opponent's course has 3, 5, 7 or 9 obstacles (Brock, Misty, Red,
Cynthia), some of them hidden, and you get 6, 4, 2 or 0 retries to match
its time. On a retry both courses are loaded again and your Pokémon stays
the same.

The score is `100 - 100 * |t1 - t2| // (t1 + t2)`, and 100 when both
times are zero.

## Using the rules on their own

The course rules in `pokerush.tp` can be used without the screen:

```python
from pokerush.tp import TP, Jugador, Obstaculo

tp = TP("pokemones_juego.csv")
print(tp.cantidad_pokemon())
print(tp.nombres_disponibles())        # sorted, comma-separated
print(tp.buscar_pokemon("pikachu"))    # lookup ignores case

tp.seleccionar_pokemon(Jugador.JUGADOR_1, "Pikachu")
tp.agregar_obstaculo(Jugador.JUGADOR_1, Obstaculo.FUERZA, 0)
tp.agregar_obstaculo(Jugador.JUGADOR_1, Obstaculo.FUERZA, 1)
print(tp.obstaculos_pista(Jugador.JUGADOR_1))       # "FF"
print(tp.tiempo_por_obstaculo(Jugador.JUGADOR_1))   # comma-separated times
print(tp.calcular_tiempo_pista(Jugador.JUGADOR_1))
```

`TP` also removes obstacles (`quitar_obstaculo`), empties a course
(`limpiar_pista`) and reports each player's Pokémon
(`pokemon_seleccionado`). A player cannot pick the Pokémon the other player
already has.

Other pieces usable on their own: `pokerush.sprite.leer_sprite` reads a BMP
file into a `Sprite`, `pokerush.pantalla.Pantalla` draws text, rectangles and
sprites on the terminal, and `pokerush.motor.ejecutar_juego` runs any
`pokerush.motor.Juego` in a frame loop.

## What is not included

The package holds no game data: the Pokémon file and the sprite images have
to be supplied. Scores are not saved between sessions.

## Running the tests

```
pip install ".[test]"
pytest
```