# hackasm/hack_assembler.py
import logging
# Use absolute imports relative to hackasm package
from hackasm.hack_consts import (
    COMP_CODES, DEST_CODES, JUMP_CODES, C_INSTRUCTION_PREFIX, MAX_ADDRESS,
    ERR_UNKNOWN_COMP, ERR_UNKNOWN_DEST, ERR_UNKNOWN_JUMP, ERR_OUT_OF_RANGE,
    ERR_EMPTY_OPERAND, ERR_MALFORMED_LABEL, WARN_DUPLICATE_LABEL
)
from hackasm.hack_parser import classify_line, is_instruction, parse_address, parse_compute
from hackasm.hack_symbols import SymbolTable

logger = logging.getLogger(__name__)
# Basic configuration if running standalone for debugging
# logging.basicConfig(level=logging.DEBUG)


class AssemblerFileError(OSError):
    """The input or output file could not be opened. Fatal for the whole run."""


class HackAssembler:
    def __init__(self):
        self.symbol_table = SymbolTable()
        self.source_lines = []  # Raw lines, iterated once per pass
        self.machine_code = []  # Stores generated integer machine code words
        self.errors = []
        self.warnings = []

    def _reset(self):
        self.symbol_table = SymbolTable()
        self.source_lines = []
        self.machine_code = []
        self.errors = []
        self.warnings = []

    def _add_error(self, line_num, kind, message, instruction_text=""):
        """Adds an error, preventing duplicates for the same line/message."""
        if not any(err['line'] == line_num and err['message'] == message for err in self.errors):
            logger.debug(f"Adding error: Line {line_num}, Msg: {message}, Text: '{instruction_text}'")
            self.errors.append({"line": line_num, "kind": kind, "message": message, "text": instruction_text})

    def _add_warning(self, line_num, kind, message, instruction_text=""):
        logger.warning(f"Line {line_num}: {message}")
        self.warnings.append({"line": line_num, "kind": kind, "message": message, "text": instruction_text})

    def first_pass(self):
        """ Pass 1: Bind every label to the address of the next real instruction. """
        instruction_address = 0

        logger.debug("--- Starting First Pass ---")
        for i, line in enumerate(self.source_lines):
            line_num = i + 1
            parsed = classify_line(line, line_num)
            if parsed is None:
                continue

            if parsed["type"] == "label":
                label = parsed["label"]
                if not self.symbol_table.insert(label, instruction_address):
                    existing = self.symbol_table.lookup(label)
                    self._add_warning(line_num, WARN_DUPLICATE_LABEL,
                                      f"Duplicate label definition: {label} (keeping address {existing})",
                                      parsed["original_text"])
                else:
                    logger.debug(f"Pass 1: Label '{label}' defined at address {instruction_address}")
            elif is_instruction(parsed):
                instruction_address += 1

        logger.debug(f"Pass 1 complete: {instruction_address} instruction lines counted")

    def second_pass(self):
        """ Pass 2: Encode every instruction, allocating variables on first reference. """
        self.machine_code = []

        logger.debug("--- Starting Second Pass ---")
        for i, line in enumerate(self.source_lines):
            line_num = i + 1
            parsed = classify_line(line, line_num)
            if parsed is None or parsed["type"] == "label":
                continue

            if parsed["type"] == "malformed_label":
                self._add_error(line_num, ERR_MALFORMED_LABEL,
                                f"Malformed label declaration: '{parsed['text']}' (missing ')')",
                                parsed["original_text"])
                logger.warning(f"Dropping malformed label on line {line_num}: '{parsed['text']}'")
                continue

            if parsed["type"] == "a_instruction":
                machine_word = self._encode_a_type(parsed)
            else:
                machine_word = self._encode_c_type(parsed)

            if machine_word is None:
                # Error was added by the encode function; drop this line and carry on
                logger.warning(f"Encoding failed for instruction on line {line_num}: '{parsed['text']}'")
                continue

            self.machine_code.append(machine_word)
            logger.debug(f"Pass 2: Assembled {machine_word:016b} for '{parsed['text']}' (from line {line_num})")

    def _resolve_address(self, operand):
        """Turns an A-instruction operand into an address, allocating variables as needed."""
        kind, value = parse_address(operand)
        if kind == "literal":
            return value
        address = self.symbol_table.allocate_variable(value)
        logger.debug(f"Resolved symbol '{value}' to {address}")
        return address

    def _encode_a_type(self, parsed):
        """Encodes A-instruction, returning integer machine code or None on error."""
        operand = parsed["operand"]
        line_num = parsed["line_num"]
        original_text = parsed["original_text"]

        if not operand:
            self._add_error(line_num, ERR_EMPTY_OPERAND, "Empty address operand after '@'", original_text)
            return None

        address = self._resolve_address(operand)
        if not (0 <= address <= MAX_ADDRESS):
            self._add_error(line_num, ERR_OUT_OF_RANGE,
                            f"Address '{operand}' ({address}) out of range for 15-bit value (0 to {MAX_ADDRESS})",
                            original_text)
            return None

        # Format: 0 value(15)
        return address

    def _encode_c_type(self, parsed):
        """Encodes C-instruction, returning integer machine code or None on error."""
        line_num = parsed["line_num"]
        original_text = parsed["original_text"]
        dest, comp, jump = parse_compute(parsed["body"])

        comp_code = COMP_CODES.get(comp)
        if comp_code is None:
            self._add_error(line_num, ERR_UNKNOWN_COMP, f"Invalid computation mnemonic: '{comp}'", original_text)
            return None

        dest_code = DEST_CODES.get(dest if dest is not None else "")
        if dest_code is None:
            self._add_error(line_num, ERR_UNKNOWN_DEST, f"Invalid destination mnemonic: '{dest}'", original_text)
            return None

        jump_code = JUMP_CODES.get(jump if jump is not None else "")
        if jump_code is None:
            self._add_error(line_num, ERR_UNKNOWN_JUMP, f"Invalid jump mnemonic: '{jump}'", original_text)
            return None

        # Format: 111 comp(7) dest(3) jump(3)
        return (C_INSTRUCTION_PREFIX << 13) | (comp_code << 6) | (dest_code << 3) | jump_code

    def _run(self, lines):
        logger.info("Starting assembly process...")
        self._reset()
        self.source_lines = list(lines)

        self.first_pass()
        self.second_pass()

        formatted_output = []
        for code in self.machine_code:
            formatted_output.append({
                "bin": f"{code:016b}",
                "hex": f"0x{code:04x}",
                "dec": str(code)
            })

        if self.errors:
            logger.warning(f"Assembly completed with {len(self.errors)} dropped instructions.")
        else:
            logger.info("Assembly successful.")

        return {
            "machine_code": formatted_output,
            "symbols": self.symbol_table.as_dict(),
            "errors": self.errors,
            "warnings": self.warnings,
        }

    def assemble(self, assembly_code):
        """ Main method to assemble Hack code held in a string. """
        return self._run(assembly_code.splitlines())

    def assemble_stream(self, source, sink):
        """ Assembles lines read from an open text stream, writing one bit string per line to sink. """
        result = self._run(source.readlines())
        for item in result["machine_code"]:
            sink.write(item["bin"] + "\n")
        return result

    def assemble_file(self, input_path, output_path):
        """ Opens both files (raising AssemblerFileError on failure) and assembles input into output. """
        try:
            source = open(input_path, 'r', encoding='ascii', errors='replace')
        except OSError as e:
            raise AssemblerFileError(f"Cannot open input file '{input_path}': {e}") from e
        with source:
            try:
                sink = open(output_path, 'w', encoding='ascii')
            except OSError as e:
                raise AssemblerFileError(f"Cannot open output file '{output_path}': {e}") from e
            with sink:
                return self.assemble_stream(source, sink)
