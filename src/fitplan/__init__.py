"""Goal-driven diet and workout planning.

Calorie targets (Mifflin-St Jeor), macro splits by diet type, plan
recommendation and randomized custom diet plan generation.
"""

__version__ = "0.1.0"
