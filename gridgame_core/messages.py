from __future__ import annotations

import locale
from enum import Enum
from typing import Dict, Optional


class Language(Enum):
    EN = 'en'
    ES = 'es'


_EN: Dict[str, str] = {
    'choose_language_prompt': 'Choose a language / Elige un idioma (EN/ES): ',
    'welcome': 'Welcome to GridGame! Reach the goal before the hidden enemies get you.',
    'ask_player_amount': 'How many players? (1-9): ',
    'ask_difficulty': 'Choose a difficulty (1 easy, 2 medium, 3 hard): ',
    'ask_player_name': 'Name for player {0} (up to 8 characters): ',
    'invalid_name': 'Names must have between 1 and 8 characters.',
    'name_already_taken': 'That name is already taken.',
    'invalid_characters': 'Please type a number: ',
    'invalid_range': 'Please type a number between {0} and {1}: ',
    'invalid_YN': 'Please answer Y or N: ',
    'turn_begins_lives': "{0}'s turn. You have {1} lives.",
    'turn_begins_life': "{0}'s turn. You have {1} life.",
    'main_menu_head': 'What will you do, {0}?',
    'main_menu_count': '  0. Count the enemies left (costs 1 life, once per game)',
    'main_menu_options': '  1. Move\n  2. Show legend',
    'main_menu_bomb': '  3. Use the bomb',
    'main_menu_foot': 'Option: ',
    'movement_prompt': 'Move as distance + direction, e.g. 2W (W up, S down, A left, D right): ',
    'invalid_format_1': 'A move is exactly two characters, e.g. 2W: ',
    'invalid_format_2': 'The distance must be between 1 and {0}: ',
    'invalid_format_3': 'The direction must be W, A, S or D: ',
    'enemy_met': 'Ouch! {0} ran into an enemy and lost a life.',
    'potion_found': '{0} found a potion and gained a life.',
    'bomb_found': '{0} found a bomb!',
    'bomb_used': 'BOOM! {0} used the bomb and destroyed {1} enemies nearby.',
    'bomb_used_one': 'BOOM! {0} used the bomb and destroyed 1 enemy nearby.',
    'enemies_left': '{0}, there are {1} enemies left.',
    'enemy_left': '{0}, there is 1 enemy left.',
    'no_enemies_left': '{0}, there are no enemies left.',
    'out_of_lives': '{0} is out of lives.',
    'lives_left': '{0} has {1} lives left.',
    'life_left': '{0} has 1 life left.',
    'player_is_dead': '{0} has died.',
    'players_are_dead': 'Everyone else is dead. {0} survives!',
    'next_turn_mp': 'Press Enter to pass the turn...',
    'next_turn_sp': 'Press Enter to continue...',
    'congratulations': 'Congratulations, you reached the goal!\n',
    'winner': 'The winner is {0}!',
    'winner_sp': 'You win!',
    'game_over': 'Game over.',
    'play_again': 'Play again? (Y/N): ',
    'thanks': 'Thanks for playing!',
    'cheat_on': ';)',
    'cheat_off': ';(',
    'legend_main': 'Legend: {0} empty  {1} {2}  {3} goal  {4} potion  {5} bomb',
    'legend_enemy': '        {0} enemy',
    'config_error': 'Cannot set up the board: {0}',
}

_ES: Dict[str, str] = {
    'choose_language_prompt': 'Choose a language / Elige un idioma (EN/ES): ',
    'welcome': '¡Bienvenido a GridGame! Llega a la meta antes de que te atrapen los enemigos ocultos.',
    'ask_player_amount': '¿Cuántos jugadores? (1-9): ',
    'ask_difficulty': 'Elige la dificultad (1 fácil, 2 media, 3 difícil): ',
    'ask_player_name': 'Nombre del jugador {0} (hasta 8 caracteres): ',
    'invalid_name': 'El nombre debe tener entre 1 y 8 caracteres.',
    'name_already_taken': 'Ese nombre ya está en uso.',
    'invalid_characters': 'Escribe un número: ',
    'invalid_range': 'Escribe un número entre {0} y {1}: ',
    'invalid_YN': 'Responde S o N (Y/N): ',
    'turn_begins_lives': 'Turno de {0}. Tienes {1} vidas.',
    'turn_begins_life': 'Turno de {0}. Tienes {1} vida.',
    'main_menu_head': '¿Qué vas a hacer, {0}?',
    'main_menu_count': '  0. Contar los enemigos restantes (cuesta 1 vida, una vez por partida)',
    'main_menu_options': '  1. Moverse\n  2. Ver leyenda',
    'main_menu_bomb': '  3. Usar la bomba',
    'main_menu_foot': 'Opción: ',
    'movement_prompt': 'Muévete con distancia + dirección, p. ej. 2W (W arriba, S abajo, A izquierda, D derecha): ',
    'invalid_format_1': 'Un movimiento son exactamente dos caracteres, p. ej. 2W: ',
    'invalid_format_2': 'La distancia debe estar entre 1 y {0}: ',
    'invalid_format_3': 'La dirección debe ser W, A, S o D: ',
    'enemy_met': '¡Ay! {0} se topó con un enemigo y perdió una vida.',
    'potion_found': '{0} encontró una poción y ganó una vida.',
    'bomb_found': '¡{0} encontró una bomba!',
    'bomb_used': '¡BUM! {0} usó la bomba y destruyó {1} enemigos cercanos.',
    'bomb_used_one': '¡BUM! {0} usó la bomba y destruyó 1 enemigo cercano.',
    'enemies_left': '{0}, quedan {1} enemigos.',
    'enemy_left': '{0}, queda 1 enemigo.',
    'no_enemies_left': '{0}, no quedan enemigos.',
    'out_of_lives': '{0} se ha quedado sin vidas.',
    'lives_left': 'A {0} le quedan {1} vidas.',
    'life_left': 'A {0} le queda 1 vida.',
    'player_is_dead': '{0} ha muerto.',
    'players_are_dead': 'Todos los demás han muerto. ¡{0} sobrevive!',
    'next_turn_mp': 'Pulsa Intro para pasar el turno...',
    'next_turn_sp': 'Pulsa Intro para continuar...',
    'congratulations': '¡Enhorabuena, has llegado a la meta!\n',
    'winner': '¡El ganador es {0}!',
    'winner_sp': '¡Has ganado!',
    'game_over': 'Fin de la partida.',
    'play_again': '¿Jugar otra vez? (Y/N): ',
    'thanks': '¡Gracias por jugar!',
    'cheat_on': ';)',
    'cheat_off': ';(',
    'legend_main': 'Leyenda: {0} vacío  {1} {2}  {3} meta  {4} poción  {5} bomba',
    'legend_enemy': '         {0} enemigo',
    'config_error': 'No se puede preparar el tablero: {0}',
}

CATALOGS: Dict[Language, Dict[str, str]] = {
    Language.EN: _EN,
    Language.ES: _ES,
}


def parse_language(text: Optional[str]) -> Language:
    """'es', 'ES', 'es_ES.UTF-8' -> ES; anything else -> EN."""
    if text and text.strip().lower()[:2] == 'es':
        return Language.ES
    return Language.EN


def detect_language(preferred: Optional[str] = None) -> Language:
    """Language from the configured value when set, otherwise from the system locale."""
    if preferred:
        return parse_language(preferred)
    try:
        system = locale.getlocale()[0]
    except ValueError:
        system = None
    return parse_language(system)


class Messages:
    """Looks up user-facing strings for one language."""

    def __init__(self, language: Language = Language.EN) -> None:
        self.language = language

    def set_language(self, language: Language) -> None:
        self.language = language

    def get(self, key: str, *args: object) -> str:
        pattern = CATALOGS[self.language][key]
        return pattern.format(*args)
