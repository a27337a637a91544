import sys

from chord_normalizer import generate_sample_filename, parse

names = [
    "Major 7th_ Cmaj7 - 1st Inversion.wav",
    "G7b9.wav",
    "5 add9_ E.wav",
    "interval_P5_C.wav",
    "ii-V-I.wav",
]

for name in names:
    chord = parse(name)
    if chord.is_valid():
        new_name = generate_sample_filename(chord, chord.original_extension)
        sys.stdout.write(f"{name} -> {chord.get_full_chord_name()} ({new_name})\n")
    else:
        # Unusable parses keep their issues for manual review
        sys.stdout.write(f"{name} -> manual review: {', '.join(chord.issues)}\n")
