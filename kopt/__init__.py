from .tsp import DistanceMatrix, InvalidTourError
from .segments import exchange, reverse
from .local_search import EPSILON, LocalSearch, SearchResult
from .two_opt import TwoOpt, run2opt
from .three_opt import ThreeOpt, run3opt
from .experiments import BenchmarkConfig, run_repeated_trials, run_size_sweep
