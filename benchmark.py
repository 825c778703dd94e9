import time
import numpy as np
from abckey.constants import LETTERS
from abckey.errors import UnrepresentableKeyError
from abckey.key_signature import KeySignature
from abckey.notation import Accidental, Mode
from abckey.transpose import transpose

def run_benchmark():
    # Setup
    np.random.seed(42)
    modes = list(Mode)
    keys = []
    while len(keys) < 1000:
        letter = LETTERS[np.random.randint(7)]
        acc = (Accidental.FLAT, Accidental.NATURAL, Accidental.SHARP)[np.random.randint(3)]
        mode = modes[np.random.randint(len(modes))]
        try:
            keys.append(KeySignature(letter, acc, mode))
        except UnrepresentableKeyError:
            continue
    semitones = np.random.randint(-11, 12, size=10000)

    # Pre-warm music21 pitch machinery
    transpose(keys[0], 1)

    # Benchmark
    start_time = time.perf_counter()
    for i, n in enumerate(semitones):
        transpose(keys[i % len(keys)], int(n))
    end_time = time.perf_counter()

    duration = end_time - start_time
    print(f"Benchmark duration: {duration:.4f} seconds ({len(semitones)} transpositions)")

if __name__ == '__main__':
    run_benchmark()
