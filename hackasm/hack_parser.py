# hackasm/hack_parser.py
"""
Line classification and field splitting for Hack assembly.

Every function here is pure: it looks at one line (or one instruction body)
and returns plain dicts/tuples. Symbol resolution and encoding happen in the
assembler.
"""
import re

LITERAL_RE = re.compile(r'^[0-9]+$')
LABEL_RE = re.compile(r'^\(([^)]*)\)')


def clean_line(raw_line):
    """Strips the line terminator, any trailing '//' comment and surrounding whitespace."""
    line = raw_line.rstrip('\r\n')
    comment_pos = line.find('//')
    if comment_pos != -1:
        line = line[:comment_pos]
    return line.strip()


def classify_line(raw_line, line_num=0):
    """
    Classifies one source line. Returns None for blank/comment lines, otherwise
    a dict whose "type" is one of "label", "malformed_label", "a_instruction"
    or "c_instruction".
    """
    line = clean_line(raw_line)
    if not line:
        return None

    parsed = {"line_num": line_num, "original_text": raw_line.rstrip('\r\n'), "text": line}

    if line.startswith('('):
        label_match = LABEL_RE.match(line)
        if not label_match:
            parsed["type"] = "malformed_label"
        else:
            parsed["type"] = "label"
            parsed["label"] = label_match.group(1)
    elif line.startswith('@'):
        parsed["type"] = "a_instruction"
        parsed["operand"] = line[1:]
    else:
        parsed["type"] = "c_instruction"
        parsed["body"] = line
    return parsed


def is_instruction(parsed):
    """True for lines that occupy an instruction address."""
    return parsed is not None and parsed["type"] in ("a_instruction", "c_instruction")


def parse_address(operand):
    """
    Splits an A-instruction operand. Returns ("literal", int) when the operand
    is all decimal digits, else ("symbol", name).
    """
    if LITERAL_RE.match(operand):
        return "literal", int(operand)
    return "symbol", operand


def parse_compute(body):
    """
    Splits 'dest=comp;jump' into (dest, comp, jump). dest and jump are None
    when their clause is absent. An '=' only counts as the destination
    separator if it comes before any ';'.
    """
    eq_pos = body.find('=')
    semi_pos = body.find(';')

    dest = None
    rest = body
    if eq_pos != -1 and (semi_pos == -1 or eq_pos < semi_pos):
        dest = body[:eq_pos]
        rest = body[eq_pos + 1:]

    comp, has_jump, jump_part = rest.partition(';')
    jump = None
    if has_jump:
        # Jump mnemonic ends at the first space
        jump = jump_part.split(' ', 1)[0]
    return dest, comp, jump
