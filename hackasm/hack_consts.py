# hackasm/hack_consts.py

# Predefined symbols (Name to Address), in the order they are seeded
PREDEFINED_SYMBOLS = [
    ("R0", 0), ("R1", 1), ("R2", 2), ("R3", 3),
    ("R4", 4), ("R5", 5), ("R6", 6), ("R7", 7),
    ("R8", 8), ("R9", 9), ("R10", 10), ("R11", 11),
    ("R12", 12), ("R13", 13), ("R14", 14), ("R15", 15),
    ("SCREEN", 16384),
    ("KBD", 24576),
    ("SP", 0),
    ("LCL", 1),
    ("ARG", 2),
    ("THIS", 3),
    ("THAT", 4),
]

# First RAM address handed out to variable symbols
VARIABLE_BASE_ADDRESS = 16

# A-instructions carry a 15-bit unsigned value
MAX_ADDRESS = (1 << 15) - 1

WORD_BITS = 16

# C-instruction prefix (top 3 bits)
C_INSTRUCTION_PREFIX = 0b111

# --- Computation field (a + c1..c6) ---
# a=0 selects the A register, a=1 selects M (RAM[A])
COMP_CODES = {
    "0":   0b0101010,
    "1":   0b0111111,
    "-1":  0b0111010,
    "D":   0b0001100,
    "A":   0b0110000,
    "!D":  0b0001101,
    "!A":  0b0110001,
    "-D":  0b0001111,
    "-A":  0b0110011,
    "D+1": 0b0011111,
    "A+1": 0b0110111,
    "D-1": 0b0001110,
    "A-1": 0b0110010,
    "D+A": 0b0000010,
    "D-A": 0b0010011,
    "A-D": 0b0000111,
    "D&A": 0b0000000,
    "D|A": 0b0010101,
    "M":   0b1110000,
    "!M":  0b1110001,
    "-M":  0b1110011,
    "M+1": 0b1110111,
    "M-1": 0b1110010,
    "D+M": 0b1000010,
    "D-M": 0b1010011,
    "M-D": 0b1000111,
    "D&M": 0b1000000,
    "D|M": 0b1010101,
}

# --- Destination field (d1=A, d2=D, d3=M) ---
DEST_CODES = {
    "":    0b000,
    "M":   0b001,
    "D":   0b010,
    "MD":  0b011,
    "A":   0b100,
    "AM":  0b101,
    "AD":  0b110,
    "AMD": 0b111,
}

# --- Jump field (j1=<0, j2==0, j3=>0) ---
JUMP_CODES = {
    "":    0b000,
    "JGT": 0b001,
    "JEQ": 0b010,
    "JGE": 0b011,
    "JLT": 0b100,
    "JNE": 0b101,
    "JLE": 0b110,
    "JMP": 0b111,
}

# Reverse maps for disassembler (Code to Mnemonic)
COMP_CODES_REV = {v: k for k, v in COMP_CODES.items()}
DEST_CODES_REV = {v: k for k, v in DEST_CODES.items()}
JUMP_CODES_REV = {v: k for k, v in JUMP_CODES.items()}

# --- Diagnostic kinds (recoverable, per instruction) ---
ERR_UNKNOWN_COMP = "unknown_comp"
ERR_UNKNOWN_DEST = "unknown_dest"
ERR_UNKNOWN_JUMP = "unknown_jump"
ERR_OUT_OF_RANGE = "out_of_range"
ERR_EMPTY_OPERAND = "empty_operand"
ERR_MALFORMED_LABEL = "malformed_label"

WARN_DUPLICATE_LABEL = "duplicate_label"
