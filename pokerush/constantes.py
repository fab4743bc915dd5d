"""Layout, colours, keys and messages shared by the game scenes.

Prefixes: X column, Y row, P position, C text colour, B background colour,
M message, T key, E style (bold, underline, italic), S symbol, D duration (ms).
"""

# Engine configuration
FRAMES_POR_SEGUNDO = 60
ANCHO_PANTALLA = 90
ALTO_PANTALLA = 30

# General
C_TRANSPARENTE = (0, 0, 0, 0.0)
X_MARGEN = 10
Y_MARGEN = 5
B_INICIAL = (0, 0, 0)
B_PRINCIPAL = (10, 50, 60)
OPACIDAD_FONDO = 25  # out of 100
D_TRANSICION_FONDO = 750
B_CARRERA = (100, 200, 100)

# Pokémon sprites
X_POKEMON = 32
Y_POKEMON = 16

# Bottom row of controls
Y_CONTROL = 27
C_CONTROL = (150, 150, 150)

X_CONTROL_1 = 5
X_CONTROL_2 = 15
X_CONTROL_3 = 25
X_CONTROL_4 = 35
X_CONTROL_5 = 45
M_ARRIBA = "[UP]"
M_ABAJO = "[DOWN]"
M_ENTER = "[ENTER]"
M_IZQUIERDA = "[LEFT]"
M_DERECHA = "[RIGHT]"
E_CONTROL = (False, False, False)

# Return control, on the right
X_SALIR = 75
M_SALIR = "[Q] Salir"
M_VOLVER = "[Q] Volver"
T_SALIR = ord("Q")

# Scene title
P_TITULO = (5, 2)
C_TITULO = (255, 255, 255)
E_TITULO = (True, True, False)

# Normal text
C_NORMAL = (220, 255, 220)
E_NORMAL = (False, False, False)

# Selected text
C_SELECCION = (5, 25, 30)
B_SELECCION = (50, 200, 255)

# Main options of a scene
E_OPCION = (True, False, False)
S_OPCION = ">"

# Trainer names
E_NOMBRE = (True, False, True)
C_NOMBRE_1 = (200, 200, 100)
C_NOMBRE_2 = (200, 100, 200)

# Opponents
M_FACIL = "Brock"
M_MEDIO = "Misty"
M_DIFICIL = "Red"
M_IMPOSIBLE = "Cynthia"

# Attributes
C_FUERZA = (255, 127, 127)
C_INTELIGENCIA = (150, 150, 255)
C_DESTREZA = (255, 255, 127)
M_FUERZA = "FUERZA"
M_INTELIGENCIA = "INTELIGENCIA"
M_DESTREZA = "DESTREZA"
S_FUERZA = "F"
S_INTELIGENCIA = "I"
S_DESTREZA = "D"

# Versus
Y_NOMBRE_START = 2
Y_NOMBRE_END = 14
X_NOMBRE_1 = 20
X_NOMBRE_2 = 74
X_VERSUS = 44
M_VERSUS = "vs"

# Sprites
SPRITE_POKEMON_DEFAULT = "pokemon_default"