import sys

from lyric_haiku import analyze_lyrics, generate_best_haiku

text = """[Verse]
I want to hold your hand
the sun goes down slow
(ooh)
and all the stars come out now
I hold your hand tight
"""

# Per-line syllable counts
for entry in analyze_lyrics(text):
    sys.stdout.write(f"{entry.syllable_count:>2}  {entry.text}\n")

# Exact haiku if one exists, otherwise the closest match
result = generate_best_haiku(text)
sys.stdout.write("\n" + result.format() + "\n")
if not result.is_exact:
    sys.stdout.write("(approximate)\n")
