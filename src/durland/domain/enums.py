"""Enumerations for the Durland domain."""

from __future__ import annotations

from enum import StrEnum


class PlayerAction(StrEnum):
    """Kinds of action a strategy may propose for a tick."""

    ZUMBALING = "Zumbaling"
    GULBONING = "Gulboning"
    SCHLAMING = "Schlaming"


class TickResult(StrEnum):
    """Outcome of a single tick; ``DIED`` is terminal."""

    OK = "Ok"
    DIED = "Died"


class RaceName(StrEnum):
    SHLENDRICS = "Шлендрики"
    HIPSTICS = "Хипстики"
    SKUFICS = "Скуфики"


class NationName(StrEnum):
    MOZHORS = "Можоры"
    NISHEBORODS = "Нищебороды"
    SOEVS = "Соевые"
    PROSVELENS = "Просветлённые"
    DRONCENTS = "Дроценты"
    ZHELEZNOUHS = "Железноухие"


class AnimalName(StrEnum):
    SLESANDERS = "Слесандры"
    SISANDERS = "Сисяндры"
    CHUCHUNDERS = "Чучундры"


class BiomeName(StrEnum):
    BALBESBURG = "Балбесбург"
    DOLBESBURG = "Долбесбург"
    KURAMARUBS = "Курамарибы"
    PUNTA_PELICANA = "Пунта-пеликана"
    SHRINAVANS = "Шринаванс"
    HARE_KIRISHI = "Харе-Кириши"


class LocationName(StrEnum):
    WORKLAND = "Воркленд"
    BEACHLAND = "Бичленд"
    PRANALAND = "Праналенд"
