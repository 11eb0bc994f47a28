Grid = list[list[int]]
Coordinate = tuple[int, int]
VisitedSet = set[Coordinate]
TraceLog = list[str]
ReachResult = dict[str, object]
