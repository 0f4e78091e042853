from trashrm.cli._rm import rm
