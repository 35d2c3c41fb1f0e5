import sys

import matplotlib.pyplot as plt
import numpy as np

from fccl import format_block, lnv_scan, make_rng
from fccl.plot import plot_belt

bak = float(sys.argv[1]) if len(sys.argv) > 1 else 1.0
rng = make_rng(123)

scan = lnv_scan(bak, signals=np.arange(1.0, 100.0), cl=0.99, scale=0.2, rng=rng)

with open("lnv_dirac.dat", "w") as outd, open("lnv_major.dat", "w") as outm:
    for i, res in enumerate(scan):
        print(f"{i} Signal {res.signal:g} is good for LNV? {res.separated}")
        outd.write(format_block(res.dirac.points()))
        outm.write(format_block(res.majorana.points()))

# First signal value for which the hypotheses separate
first = next((res for res in scan if res.separated), scan[-1])
fig, ax = plt.subplots()
plot_belt(first.dirac, ax=ax, candidates=False)
plot_belt(first.majorana, ax=ax, candidates=False)
ax.set_title(f"Dirac vs Majorana belts, signal {first.signal:g}")
plt.show()
