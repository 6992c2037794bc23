"""Day 17: run the three-bit computer and find a self-reproducing input."""


def _register(line, name):
    prefix = f"Register {name}: "
    if line is None or not line.startswith(prefix):
        raise ValueError(f"expected register {name}, got {line!r}")
    value = int(line[len(prefix):])
    if value < 0:
        raise ValueError(f"register {name} must not be negative")
    return value


def parse(text):
    """Registers A, B and C and the program, as (a, b, c, program)."""
    lines = iter(text.splitlines())
    a = _register(next(lines, None), "A")
    b = _register(next(lines, None), "B")
    c = _register(next(lines, None), "C")
    next(lines, None)
    program_line = next(lines, None)
    prefix = "Program: "
    if program_line is None or not program_line.startswith(prefix):
        raise ValueError(f"expected a program, got {program_line!r}")
    program = [int(value) for value in program_line[len(prefix):].split(",")]
    if any(value < 0 for value in program):
        raise ValueError("program values must not be negative")
    return a, b, c, program


def _combo(operand, a, b, c):
    if 0 <= operand <= 3:
        return operand
    registers = {4: a, 5: b, 6: c}
    if operand not in registers:
        raise ValueError(f"invalid combo operand {operand}")
    return registers[operand]


def run(program, a, b=0, c=0):
    """Execute the program and return the list of output values."""
    output = []
    ip = 0
    while ip + 2 <= len(program):
        opcode, literal = program[ip], program[ip + 1]
        combo = _combo(literal, a, b, c)
        ip += 2
        match opcode:
            case 0:
                a >>= combo
            case 1:
                b ^= literal
            case 2:
                b = combo % 8
            case 3:
                if a != 0:
                    ip = literal
            case 4:
                b ^= c
            case 5:
                output.append(combo % 8)
            case 6:
                b = a >> combo
            case 7:
                c = a >> combo
            case _:
                raise ValueError(f"invalid opcode {opcode}")
    return output


def find_initial_a(program):
    """Lowest value of register A found that makes the program output itself."""
    target = list(program)

    def search(a, length):
        if length > len(target):
            return a
        suffix = target[-length:]
        for digit in range(8):
            candidate = a << 3 | digit
            if run(target, candidate) == suffix:
                found = search(candidate, length + 1)
                if found is not None:
                    return found
        return None

    result = search(0, 1)
    if result is None:
        raise ValueError("no initial value of register A reproduces the program")
    return result


def part1(text):
    """The program output, joined with commas."""
    a, b, c, program = parse(text)
    return ",".join(str(value) for value in run(program, a, b, c))


def part2(text):
    """Initial register A for which the program outputs a copy of itself."""
    _, _, _, program = parse(text)
    return find_initial_a(program)