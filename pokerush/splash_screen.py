"""Opening screen with the game's logo."""

from __future__ import annotations

from pokerush.animacion import linear, parpadeo
from pokerush.color import Color
from pokerush.constantes import C_CONTROL, C_TRANSPARENTE, E_CONTROL, Y_CONTROL
from pokerush.escena import Contexto, Escena, NombreEscena
from pokerush.pantalla import Pantalla

P_LOGO = (7, 5)
P_POKEBALL = (35, 14)
D_ANIMACION = 1500
R_LOGO = 1000
D_PARPADEO = 700
_B_INICIAL = Color(0, 0, 0)
_B_FINAL = Color(255, 255, 255)
M_CONTROL = "Presiona cualquier tecla para continuar"
X_CONTROL = 25


class SplashScreen(Escena):
    """Fades the logo in and waits for any key."""

    def __init__(self, contexto: Contexto) -> None:
        self.logo_back = contexto.sprites.get("logo_back")
        self.logo_front = contexto.sprites.get("logo_front")
        self.pokeball = contexto.sprites.get("pokeball")

    def procesar_eventos(self, tecla: int, contexto: Contexto) -> NombreEscena:
        if tecla != 0:
            return NombreEscena.ENTRENADOR
        return NombreEscena.SPLASH_SCREEN

    def dibujar_graficos(self, pantalla: Pantalla, contexto: Contexto) -> None:
        t = contexto.tiempo_escena_ms

        progreso = linear(t, 0, D_ANIMACION, 0, 1)
        color = _B_FINAL.mezcla(_B_INICIAL, progreso)
        pantalla.color_fondo(*color, 1.0)
        pantalla.fondo()

        progreso = linear(t, R_LOGO, R_LOGO + D_ANIMACION, 0, 1)
        pantalla.sprite(*P_LOGO, self.logo_back, 1.0)
        pantalla.sprite(*P_LOGO, self.logo_front, progreso)
        pantalla.sprite(*P_POKEBALL, self.pokeball, progreso)

        if t > D_ANIMACION + R_LOGO and not parpadeo(t, D_PARPADEO, False, True):
            pantalla.color_fondo(*C_TRANSPARENTE)
            pantalla.color_texto(*C_CONTROL, 1.0)
            pantalla.estilo_texto(*E_CONTROL)
            pantalla.texto(X_CONTROL, Y_CONTROL, M_CONTROL)