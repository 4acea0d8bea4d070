"""City cards with derived attributes and a head-to-head comparison."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass


def _divide(numerator, denominator):
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


@dataclass
class Card:
    """A city card; the GDP is given in billions."""

    state: str
    code: str
    city: str
    population: int
    area: float
    gdp: float
    tourist_spots: int

    @property
    def population_density(self):
        return _divide(self.population, self.area)

    @property
    def gdp_per_capita(self):
        return _divide(self.gdp * 1e9, self.population)

    @property
    def super_power(self):
        return (
            self.population
            + self.area
            + self.gdp
            + self.tourist_spots
            + self.gdp_per_capita
            + _divide(1.0, self.population_density)
        )

    def describe(self, number):
        """Return the card's full listing."""
        lines = [
            f"Carta {number}:",
            f"Estado: {self.state}",
            f"Codigo: {self.code}",
            f"Nome da Cidade: {self.city}",
            f"Populacao: {self.population}",
            f"Area: {self.area:.2f} km²",
            f"PIB: {self.gdp:.2f} bilhoes de reais",
            f"Numero de Pontos Turisticos: {self.tourist_spots}",
            f"Densidade Populacional: {self.population_density:.2f} hab/km²",
            f"PIB per Capita: {self.gdp_per_capita:.2f} reais",
            f"Super Poder: {self.super_power:.2f}",
        ]
        return "\n".join(lines) + "\n"


def compare_cards(first, second):
    """Map each attribute label to whether the first card wins it.

    Lower density wins; for the rest higher wins. Ties go to the second card.
    """
    return {
        "Populacao": first.population > second.population,
        "Area": first.area > second.area,
        "PIB": first.gdp > second.gdp,
        "Pontos Turisticos": first.tourist_spots > second.tourist_spots,
        "Densidade Populacional": first.population_density < second.population_density,
        "PIB per Capita": first.gdp_per_capita > second.gdp_per_capita,
        "Super Poder": first.super_power > second.super_power,
    }


def _require(text, field):
    text = text.strip()
    if not text:
        raise ValueError(f"{field} is required")
    return text


def read_card(number, ask):
    """Read a card's fields through ask(prompt) and return the card."""
    print(f"Digite os dados da Carta {number}:")
    state = _require(ask("Estado (A-H): "), "state")[0]
    code = _require(ask("Codigo da Carta (ex: A01): "), "code").split()[0][:3]
    city = _require(ask("Nome da Cidade: "), "city")[:49]
    population = int(ask("Populacao: ").strip())
    if population < 0:
        raise ValueError("population cannot be negative")
    area = float(ask("Area (km2): ").strip())
    gdp = float(ask("PIB (bilhoes): ").strip())
    tourist_spots = int(ask("Numero de Pontos Turisticos: ").strip())
    print()
    return Card(state, code, city, population, area, gdp, tourist_spots)


def main(argv=None):
    """Read two cards, show them and compare every attribute."""
    try:
        first = read_card(1, input)
        second = read_card(2, input)
    except EOFError:
        return 1
    except ValueError as error:
        print(f"Entrada inválida: {error}", file=sys.stderr)
        return 1
    print(first.describe(1))
    print(second.describe(2))
    print("Comparacao de Cartas:")
    for label, first_wins in compare_cards(first, second).items():
        print(f"{label}: Carta {1 if first_wins else 2} venceu ({int(first_wins)})")
    return 0