"""Reading Kover/JaCoCo XML coverage reports."""
