"""
Contrats d'interaction avec l'hote (CLI, interface graphique).

- LogSink : recoit chaque message du journal d'audit (console, zone de
  texte, ou rien)
- ConfirmCallback : demande synchrone de confirmation avant suppression,
  appelee avec (type d'element, description) et retournant un booleen

Le ConfirmCallback est bloquant : le moteur attend sa reponse. Un hote qui
le redirige vers un autre thread (thread d'interface) doit garantir que ce
thread est libre de repondre, sinon les deux threads s'attendent
mutuellement.
"""

from typing import Callable

LogSink = Callable[[str], None]

ConfirmCallback = Callable[[str, str], bool]


def null_sink(message: str) -> None:
    """Sink qui ignore les messages."""
