"""Labubu pixel figures from a 5-byte identifier.

Same byte layout and palette rules as mooncat. Templates only use slots
0-5, and one standing pose is built in, so no catalog is needed for
design 0.

Example:
    idpix labubu 0000000000 -o labubu.png
"""

from idpix.core.types import Variant

STANDING = (
    '00001100000000110000.00013310000001331000.00133331000133331000.'
    '01333333101333333100.01333333311333333100.00111111111111111100.'
    '01333333333333333100.13334433333333443331.13340433333333404331.'
    '13333333333333333331.13333111111111133331.13331551551551513331.'
    '13331111111111113331.01333333333333333100.00133222222222223310.'
    '00011222222222221100.00000111111111110000'
)

variant = Variant(
    name='labubu',
    help='Decode a Labubu identifier. Ships with a built-in standing pose.',
    alphabet='012345',
    designs=(STANDING,),
)
