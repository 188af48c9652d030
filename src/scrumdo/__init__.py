"""Git-backed Scrum backlog and sprint tracker."""
