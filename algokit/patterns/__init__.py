"""Small examples of common object-oriented design patterns."""