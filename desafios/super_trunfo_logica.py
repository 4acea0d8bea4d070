"""City cards compared on one or two chosen attributes."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum

UNKNOWN_LABEL = "Desconhecido"


class Attribute(IntEnum):
    """Attributes a card can be compared on, numbered as in the menu."""

    POPULATION = 1, "População"
    AREA = 2, "Área"
    GDP = 3, "PIB"
    TOURIST_SPOTS = 4, "Número de Pontos Turísticos"
    POPULATION_DENSITY = 5, "Densidade Populacional"
    GDP_PER_CAPITA = 6, "PIB per Capita"
    SUPER_POWER = 7, "Super Poder"

    def __new__(cls, value, label):
        member = int.__new__(cls, value)
        member._value_ = value
        member.label = label
        return member

    @property
    def lower_is_better(self):
        """Whether the smaller value wins for this attribute."""
        return self is Attribute.POPULATION_DENSITY


@dataclass
class Card:
    """A city card; the GDP is given in billions."""

    state: str
    code: str
    city: str
    country: str
    population: int
    area: float
    gdp: float
    tourist_spots: int

    @property
    def population_density(self):
        return self.population / self.area if self.area > 0 else 0.0

    @property
    def gdp_per_capita(self):
        return self.gdp * 1e9 / self.population if self.population > 0 else 0.0

    @property
    def super_power(self):
        density = self.population_density
        return (
            self.population
            + self.area
            + self.gdp * 1e9
            + self.tourist_spots
            + self.gdp_per_capita
            + (1.0 / density if density > 0 else 0.0)
        )

    def value(self, attribute):
        """Return the card's value for an attribute as a float."""
        attribute = Attribute(attribute)
        values = {
            Attribute.POPULATION: self.population,
            Attribute.AREA: self.area,
            Attribute.GDP: self.gdp,
            Attribute.TOURIST_SPOTS: self.tourist_spots,
            Attribute.POPULATION_DENSITY: self.population_density,
            Attribute.GDP_PER_CAPITA: self.gdp_per_capita,
            Attribute.SUPER_POWER: self.super_power,
        }
        return float(values[attribute])

    def describe(self, number):
        """Return the card's full listing."""
        lines = [
            f"Carta {number}:",
            f"Estado: {self.state}",
            f"Código: {self.code}",
            f"Cidade: {self.city}",
            f"País: {self.country}",
            f"População: {self.population}",
            f"Área: {self.area:.2f} km²",
            f"PIB: {self.gdp:.2f} bilhões",
            f"Pontos Turísticos: {self.tourist_spots}",
            f"Densidade Populacional: {self.population_density:.2f} hab/km²",
            f"PIB per Capita: {self.gdp_per_capita:.2f} reais",
            f"Super Poder: {self.super_power:.2f}",
        ]
        return "\n".join(lines) + "\n"

    def summary(self):
        """Return the short listing shown before a comparison."""
        lines = [
            f"{self.city} ({self.state} - {self.country}) [{self.code}]:",
            f"População: {self.population}",
            f"Área: {self.area:.2f} km²",
            f"PIB: {self.gdp:.2f} bilhões",
            f"Pontos turísticos: {self.tourist_spots}",
            f"Densidade Populacional: {self.population_density:.2f} hab/km²",
            f"PIB per capita: {self.gdp_per_capita:.2f} reais/habitante",
        ]
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class SingleComparison:
    """Outcome of comparing two cards on one attribute; winner is 0 on a tie."""

    attribute: Attribute
    first_value: float
    second_value: float
    winner: int


@dataclass(frozen=True)
class DoubleComparison:
    """Outcome of comparing two cards on two attributes, decided by the sums."""

    first: SingleComparison
    second: SingleComparison
    first_total: float
    second_total: float
    winner: int


def compare_values(first, second, attribute):
    """Return 1 if the first value wins, 2 if the second does, 0 on a tie."""
    if Attribute(attribute).lower_is_better:
        first, second = second, first
    if first > second:
        return 1
    if first < second:
        return 2
    return 0


def compare_single(first, second, attribute):
    """Compare two cards on one attribute."""
    attribute = Attribute(attribute)
    first_value = first.value(attribute)
    second_value = second.value(attribute)
    return SingleComparison(
        attribute, first_value, second_value,
        compare_values(first_value, second_value, attribute),
    )


def compare_two(first, second, attribute1, attribute2):
    """Compare two cards on two different attributes; the larger sum wins."""
    attribute1, attribute2 = Attribute(attribute1), Attribute(attribute2)
    if attribute1 is attribute2:
        raise ValueError("the two attributes must differ")
    one = compare_single(first, second, attribute1)
    two = compare_single(first, second, attribute2)
    first_total = one.first_value + two.first_value
    second_total = one.second_value + two.second_value
    if first_total > second_total:
        winner = 1
    elif second_total > first_total:
        winner = 2
    else:
        winner = 0
    return DoubleComparison(one, two, first_total, second_total, winner)


def choose_attribute(ask, exclude=None):
    """Show the attribute menu and ask until a valid, non-excluded choice is given."""
    while True:
        print("Escolha o atributo para comparar:")
        for attribute in Attribute:
            if attribute != exclude:
                print(f"{attribute.value} - {attribute.label}")
        answer = ask("Opção: ").strip()
        try:
            choice = int(answer)
        except ValueError:
            choice = None
        if choice in {a.value for a in Attribute} and choice != exclude:
            return Attribute(choice)
        print("Opção inválida. Tente novamente.\n")


def _require(text, field):
    text = text.strip()
    if not text:
        raise ValueError(f"{field} is required")
    return text


def read_card(number, ask):
    """Read a card's fields through ask(prompt) and return the card."""
    print(f"Digite os dados da Carta {number}:")
    state = _require(ask("Estado (ex: SP): "), "state").split()[0][:2]
    code = _require(ask("Código da Carta (ex: C001): "), "code").split()[0][:9]
    city = _require(ask("Nome da Cidade: "), "city")[:49]
    country = _require(ask("Nome do País: "), "country")[:49]
    population = int(ask("População: ").strip())
    if population < 0:
        raise ValueError("population cannot be negative")
    area = float(ask("Área (km²): ").strip())
    gdp = float(ask("PIB (bilhões): ").strip())
    tourist_spots = int(ask("Número de Pontos Turísticos: ").strip())
    print()
    return Card(state, code, city, country, population, area, gdp, tourist_spots)


def _print_values(first, second, first_value, second_value, end="\n"):
    print(f"Carta 1 - {first.city}: {first_value:.2f}")
    print(f"Carta 2 - {second.city}: {second_value:.2f}{end}")


def _print_result(prefix, first, second, winner):
    if winner == 1:
        print(f"{prefix}: Carta 1 ({first.city}) venceu!")
    elif winner == 2:
        print(f"{prefix}: Carta 2 ({second.city}) venceu!")
    else:
        print(f"{prefix}: Empate!")


def _print_summaries(first, second):
    print(first.summary())
    print(second.summary())


def _basic_level(first, second, choice):
    try:
        result = compare_single(first, second, choice)
        label = result.attribute.label
        first_value, second_value, winner = result.first_value, result.second_value, result.winner
    except ValueError:
        label, first_value, second_value, winner = UNKNOWN_LABEL, 0.0, 0.0, 0
    print(f"\n=== Nível Básico - Comparação fixa ({label}) ===\n")
    _print_summaries(first, second)
    print(f"Comparando atributo fixo: {label}")
    _print_values(first, second, first_value, second_value)
    _print_result("Resultado", first, second, winner)


def _intermediate_level(first, second, ask):
    print("\n=== Nível Intermediário - Escolha um atributo ===\n")
    _print_summaries(first, second)
    result = compare_single(first, second, choose_attribute(ask))
    print(f"\nComparando pelo atributo: {result.attribute.label}")
    _print_values(first, second, result.first_value, result.second_value)
    _print_result("Resultado", first, second, result.winner)


def _master_level(first, second, ask):
    print("\n=== Nível Mestre - Comparação com dois atributos ===\n")
    _print_summaries(first, second)
    attribute1 = choose_attribute(ask)
    attribute2 = choose_attribute(ask, attribute1)
    result = compare_two(first, second, attribute1, attribute2)
    print("\nComparação por atributos selecionados:\n")
    for index, part in enumerate((result.first, result.second), start=1):
        print(f"Atributo {index} - {part.attribute.label}:")
        _print_values(first, second, part.first_value, part.second_value)
    print("Soma dos atributos:")
    _print_values(first, second, result.first_total, result.second_total)
    _print_result("Resultado final", first, second, result.winner)


def _read_int(ask, prompt):
    try:
        return int(ask(prompt).strip())
    except ValueError:
        return None


def main(argv=None):
    """Register two cards and compare them at the chosen level."""
    ask = input
    try:
        print("=== Cadastro da Carta 1 ===")
        first = read_card(1, ask)
        print("=== Cadastro da Carta 2 ===")
        second = read_card(2, ask)
    except EOFError:
        return 1
    except ValueError as error:
        print(f"Entrada inválida: {error}", file=sys.stderr)
        return 1
    print(first.describe(1))
    print(second.describe(2))
    try:
        print("Escolha o nível para comparação:")
        print("1 - Nível Básico (atributo fixo)")
        print("2 - Nível Intermediário (menu escolha um atributo)")
        print("3 - Nível Mestre (escolha dois atributos)")
        level = _read_int(ask, "Opção: ")
        if level == 1:
            print("Escolha o atributo fixo para comparar:")
            for attribute in Attribute:
                print(f"{attribute.value} - {attribute.label}")
            _basic_level(first, second, _read_int(ask, ""))
        elif level == 2:
            _intermediate_level(first, second, ask)
        elif level == 3:
            _master_level(first, second, ask)
        else:
            print("Opção inválida. Finalizando.")
    except EOFError:
        return 1
    return 0