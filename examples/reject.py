import sys

from fccl import rejection_signal
from fccl.utils import setup_logging

setup_logging(verbose=1)

# Expected background; the null hypothesis is "background only"
bak = float(sys.argv[1]) if len(sys.argv) > 1 else 3.0
CL = 0.90

res = rejection_signal(bak, cl=CL)

print(f"For background of {bak} mean signal is {res.signal:.3f}")
print(
    f"Confidence belt ({CL * 100:.0f}%) is contained between {res.lower} and {res.upper}"
)
