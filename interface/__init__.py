"""Console front end for the tic-tac-toe engine."""
