"""Domain layer - questionnaire and energy profile bounded contexts."""
