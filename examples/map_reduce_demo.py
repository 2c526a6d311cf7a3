from __future__ import annotations

from mapreduce import Seq, setup_logger


def multiplier(value: int) -> int:
    return value * 2


def summer(result: int, item: int) -> int:
    return result + item


def is_uneven(number: int) -> bool:
    return number % 2 != 0


def section(title: str) -> None:
    print(title)


def end_section() -> None:
    print("\n\n")


def main() -> None:
    setup_logger()

    even_numbers = Seq.of(0, 2, 4, 6, 8)
    three_multiplications = Seq.of(0, 3, 6, 9)

    section("PRINTLIST")
    even_numbers.print_list()
    end_section()

    section("MAP")
    even_numbers.map(multiplier).print_list()
    end_section()

    section("REDUCE")
    print(even_numbers.reduce(0, summer))
    end_section()

    section("WHERE")
    even_numbers.where(is_uneven).print_list()
    three_multiplications.where(is_uneven).print_list()
    end_section()

    section("JOIN")
    even_numbers.simple_join(
        three_multiplications, lambda left, right: (left + right) % 2 == 0
    ).print_list()
    even_numbers.join(three_multiplications, lambda left, right: True).print_list()


if __name__ == "__main__":
    main()
