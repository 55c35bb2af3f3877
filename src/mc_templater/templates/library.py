# Bundled templates, authored facing north.
#
# One line per depth slice (front to back); rows are separated by three
# spaces (bottom row first) and cells within a row by a single space.

HOUSE = """\
# Small oak cottage with a bed, a chest and two wall torches
l=oak_log
p=oak_planks
g=glass_pane
.=air
r=oak_slab
s=oak_stairs 2
S=oak_stairs 3
t=torch 4
h=chest 2
b=bed 0
v=$villager
> base cobblestone margin:1
 l p . p l   l g . g l   l p p p l   s s s s s
 p . . . p   g . . . g   p t . t p   r r r r r
 p . v . p   p . . . p   p . . . p   r r r r r
 p h . b p   g . . . g   p . . . p   r r r r r
 l p p p l   l g g g l   l p p p l   S S S S S
"""

TOWER = """\
# Stone watch tower, vines over the front window and a lantern at the top
s=stone_bricks
.=air
v=vine 1
T=torch 3
L=lantern
> offset 0 0 2
 s s s   s . s   s s s   s v s   s s s   s s s
 s . s   s . s   s T s   s . s   s . s   s L s
 s s s   s s s   s s s   s s s   s s s   s s s
"""

FARM = """\
# Fenced wheat field with a water channel and a few chickens
f=oak_fence
G=fence_gate 0
d=farmland
w=water
W=wheat
x=dirt
c=$chicken count:3
.=air
> base grass margin:1
 f f G f f   . . . . .
 f d w d f   . W . W .
 f x w x f   . c . c .
 f d w d f   . W . W .
 f f f f f   . . . . .
"""

WELL = """\
# Village well with a bell under the roof
c=cobblestone
w=water
f=oak_fence
p=oak_planks
B=bell
.=air
> offset 0 0 -1
> base gravel
 c c c   f . f   f . f   p p p
 c w c   . . .   . B .   p p p
 c c c   f . f   f . f   p p p
"""

TEMPLATES = {
    "house": HOUSE,
    "tower": TOWER,
    "farm": FARM,
    "well": WELL,
}
