"""
import_engine.field_map - CSV column ↔ model attribute mapping.

Headers are matched case-insensitively after stripping; every column
maps to one VoltageRegulator attribute and one value kind.
"""

# CSV column name  →  (VoltageRegulator attribute, kind)
#   kind: "lcsc" | "str" | "enum" | "bool" | "float" | "int"
COLUMNS: dict[str, tuple[str, str]] = {
    "lcsc":               ("lcsc", "lcsc"),
    "mfr":                ("mfr", "str"),
    "package":            ("package", "str"),
    "output_type":        ("output_type", "enum"),
    "is_low_dropout":     ("is_low_dropout", "bool"),
    "is_positive":        ("is_positive", "bool"),
    "output_voltage_min": ("output_voltage_min", "float"),
    "output_voltage_max": ("output_voltage_max", "float"),
    "output_current_max": ("output_current_max", "float"),
    "dropout_voltage":    ("dropout_voltage", "float"),
    "input_voltage_min":  ("input_voltage_min", "float"),
    "input_voltage_max":  ("input_voltage_max", "float"),
    "quiescent_current":  ("quiescent_current", "float"),
    "stock":              ("stock", "int"),
    "price1":             ("price1", "float"),
}

# Columns a row cannot be imported without
REQUIRED_COLUMNS = frozenset({"lcsc", "output_type"})

TRUE_VALUES  = frozenset({"1", "true", "yes", "y"})
FALSE_VALUES = frozenset({"0", "false", "no", "n"})
