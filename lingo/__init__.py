"""Learning-progress backend for a gamified course tracker."""
