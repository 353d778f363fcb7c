from .action import GroupAction, conjugation, left_multiplication_on_cosets
from .cauchy import (ProductOneTuple, ProductOneTuples, cauchy,
                     exists_element_of_order)
from .counting import (Congruence, another_fixed_point, census,
                       fixed_point_congruence, fixed_point_exists)
from .errors import InvalidArgument, InvariantError, Unsatisfiable
from .group import (AbelianGroup, AlternatingGroup, Cycles, CyclicGroup,
                    DihedralGroup, FiniteGroup, PermutationGroup,
                    QuotientGroup, Subgroup, SymmetricGroup)
from .sylow import exists_subgroup_of_order, sylow_subgroup
from .version import __version__
