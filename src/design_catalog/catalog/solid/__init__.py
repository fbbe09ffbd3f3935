"""SOLID principle demonstrations, each as a violating and an adhering design."""
