# hackasm/hack_disassembler.py
from hackasm.hack_consts import (
    COMP_CODES_REV, DEST_CODES_REV, JUMP_CODES_REV, C_INSTRUCTION_PREFIX, WORD_BITS
)
import logging

logger = logging.getLogger(__name__)


class HackDisassembler:
    def __init__(self):
        self.errors = []  # Store errors encountered during disassembly

    def disassemble_instruction(self, machine_code_int):
        """ Disassembles a single 16-bit machine code integer. """
        self.errors = []  # Clear errors for this specific instruction

        if not isinstance(machine_code_int, int):
            self.errors.append({"message": "Invalid machine code format, expected integer"})
            return "Error: Invalid input type"

        # --- A-instruction (top bit 0) ---
        if (machine_code_int >> 15) == 0:
            return f"@{machine_code_int}"

        prefix = (machine_code_int >> 13) & 0x7
        comp = (machine_code_int >> 6) & 0x7F
        dest = (machine_code_int >> 3) & 0x7
        jump = machine_code_int & 0x7

        if prefix != C_INSTRUCTION_PREFIX:
            self.errors.append({"message": f"C-instruction must start with 111, got {prefix:03b}"})
            return f"Unknown Instruction ({machine_code_int:016b})"

        comp_mnemonic = COMP_CODES_REV.get(comp)
        if comp_mnemonic is None:
            self.errors.append({"message": f"Unassigned computation code {comp:07b}"})
            return f"Unknown computation ({comp:07b})"

        text = comp_mnemonic
        dest_mnemonic = DEST_CODES_REV[dest]
        jump_mnemonic = JUMP_CODES_REV[jump]
        if dest_mnemonic:
            text = f"{dest_mnemonic}={text}"
        if jump_mnemonic:
            text = f"{text};{jump_mnemonic}"
        return text

    def disassemble(self, machine_code_lines):
        """ Main method to disassemble a list of binary strings. Returns dict with 'assembly_code' and 'errors'. """
        assembly_lines = []
        all_errors = []

        for i, bin_line in enumerate(machine_code_lines):
            line_num = i + 1
            try:
                bin_line = bin_line.strip()
                if not bin_line: continue  # Skip empty lines

                if len(bin_line) != WORD_BITS: raise ValueError(f"Invalid length: '{bin_line}' (expected {WORD_BITS} digits)")
                if not all(c in '01' for c in bin_line): raise ValueError(f"Invalid binary character found: '{bin_line}'")

                asm_line = self.disassemble_instruction(int(bin_line, 2))

                if self.errors:
                    for err in self.errors:
                        all_errors.append({"line": line_num, "message": err["message"]})
                    assembly_lines.append(f"Error line {line_num}: {self.errors[-1]['message']}")
                else:
                    assembly_lines.append(asm_line)

            except ValueError as e:
                all_errors.append({"line": line_num, "message": f"Invalid binary format/value: {e}"})
                assembly_lines.append(f"Error line {line_num}: Invalid binary input")
            except AttributeError:
                all_errors.append({"line": line_num, "message": f"Expected a string, got {type(bin_line).__name__}"})
                assembly_lines.append(f"Error line {line_num}: Invalid binary input")

        self.errors = all_errors
        if all_errors:
            logger.warning(f"Disassembly completed with {len(all_errors)} errors.")
        return {"assembly_code": assembly_lines, "errors": all_errors}
