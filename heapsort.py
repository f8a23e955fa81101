import csv
import logging
import os
import sys
import time
from typing import List, Optional

import numpy as np
import pandas as pd

from heap_ import BinaryHeap, new_heap
from heap_errors import HeapError
from heap_logger import configure
from heap_utils import Comparator, naive_primitive_comparator
from mode_ import HeapMode, MinHeap, parse_mode

DEFAULT_INPUT_FILENAME = "heap_input.txt"
OUTPUT_FILENAME = "sorted_output.csv"

logger = logging.getLogger("binary_heap.heapsort")


class HeapsortParams:
    def __init__(self):
        self.mode: HeapMode = MinHeap
        self.values_from_file = False
        self.values_filename = "values.csv"
        self.values_column = "value"
        self.n_values = 0
        self.average_value = 0.0
        self.value_deviation = 1.0
        self.seed: Optional[int] = None


def parse_bool(value: str) -> bool:
    return value.strip().lower() == "true"


def read_input(filename: str = DEFAULT_INPUT_FILENAME) -> HeapsortParams:
    """
    Read `key=value` parameters from `filename`.

    Blank lines and lines starting with '#' are skipped. Unknown keys raise
    ValueError; a missing or unreadable file raises RuntimeError.
    """
    params = HeapsortParams()

    try:
        with open(filename, "r") as input_file:
            for line in input_file:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" not in line:
                    raise ValueError(f"Malformed line in {filename}: {line!r}")

                parameter, value = line.split("=", 1)
                parameter = parameter.strip()
                value = value.strip()

                if parameter == "mode":
                    params.mode = parse_mode(value)
                elif parameter == "generate_values_from_file":
                    params.values_from_file = parse_bool(value)
                elif parameter == "values_filename":
                    params.values_filename = value
                elif parameter == "values_column":
                    params.values_column = value
                elif parameter == "n_values":
                    params.n_values = int(value)
                elif parameter == "average_value":
                    params.average_value = float(value)
                elif parameter == "value_deviation":
                    params.value_deviation = float(value)
                elif parameter == "seed":
                    params.seed = int(value) if value else None
                else:
                    raise ValueError(f"Unknown parameter {parameter}")
    except FileNotFoundError:
        raise RuntimeError(f"Cannot open file <{filename}>.")
    except OSError as e:
        raise RuntimeError(f"Cannot read file <{filename}>: {e}")

    return params


def initialize_random_generator(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


# Generate Random Values
def generate_random_values(params: HeapsortParams, random_generator: np.random.Generator) -> List[float]:
    values = random_generator.normal(params.average_value, params.value_deviation, params.n_values)
    return values.tolist()


# Read Values from File
def read_values(filename: str, column: str) -> list:
    try:
        values_df = pd.read_csv(filename)
    except FileNotFoundError:
        raise RuntimeError(f"File '{filename}' not found.")
    except OSError as e:
        raise RuntimeError(f"Cannot read values file '{filename}': {e}")
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as pe:
        raise RuntimeError(f"Error parsing values file '{filename}': {pe}")

    if column not in values_df.columns:
        raise RuntimeError(f"Column '{column}' not found in values file '{filename}'.")

    return values_df[column].dropna().tolist()


def initialize_values(params: HeapsortParams, random_generator: np.random.Generator) -> list:
    if params.values_from_file:
        return read_values(params.values_filename, params.values_column)
    return generate_random_values(params, random_generator)


def drain(heap: BinaryHeap) -> list:
    drained = []
    while not heap.is_empty():
        drained.append(heap.remove())
    return drained


def heapsort(values, mode: HeapMode = MinHeap, comparator: Comparator = naive_primitive_comparator) -> list:
    """Insert `values` one at a time, then drain: ascending for MinHeap, descending for MaxHeap."""
    heap = new_heap(mode, comparator)
    for value in values:
        heap.insert(value)
    return drain(heap)


def write_output(values: list, output_dir_name: str) -> str:
    if not os.path.isdir(output_dir_name):
        logger.warning("Cannot find the output directory. The output will be stored in the current directory.")
        output_dir_name = "./"

    output_filename = os.path.join(output_dir_name, OUTPUT_FILENAME)
    with open(output_filename, "w", newline='') as csv_output:
        writer = csv.writer(csv_output)
        writer.writerow(["position", "value"])
        for position, value in enumerate(values):
            writer.writerow([position, value])

    return output_filename


def main(argv) -> int:
    verbose = any(arg in ("-v", "--verbose") for arg in argv[1:])
    args = [arg for arg in argv[1:] if arg not in ("-v", "--verbose")]
    configure(verbose)

    if not args or len(args) > 2:
        logger.error("please specify the output directory (and optionally the input file)")
        return -1

    output_dir_name = args[0]
    input_filename = args[1] if len(args) == 2 else DEFAULT_INPUT_FILENAME

    try:
        params = read_input(input_filename)
        logger.info("VALUES INITIALIZATION")
        random_generator = initialize_random_generator(params.seed)
        values = initialize_values(params, random_generator)
    except (ValueError, RuntimeError, HeapError) as e:
        logger.error("%s", e)
        return -1

    logger.info("HEAPSORT OF %d VALUES (%s heap)", len(values), params.mode.value)
    begin = time.time()
    sorted_values = heapsort(values, params.mode)
    time_spent = time.time() - begin
    logger.info("Time consumed by heapsort: %.2f s", time_spent)

    output_filename = write_output(sorted_values, output_dir_name)
    logger.info("Output written to %s", output_filename)
    return 0


def run():
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
