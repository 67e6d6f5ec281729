from .tsp import City, TSPInstance
from .config import ACOConfig
from .errors import ACOError, ConfigurationError, ProblemFormatError
from .pheromone import PheromoneTable
from .transition import TransitionRule, weighted_choice
from .agent import Agent
from .update import UpdatePolicy
from .tracker import BestSolutionTracker
from .colony import AntColony, ACOResult, IterationStats, solve
from .experiments import run_parameter_sweep, run_repeated_trials
