from .abelian import AbelianGroup, CyclicGroup
from .finite_group import (Coset, CosetSpace, FiniteGroup, QuotientGroup,
                           Subgroup)
from .permutation import (AlternatingGroup, Cycles, DihedralGroup,
                          PermutationGroup, SymmetricGroup, permute)
