"""Reporting-line tree derived from the flat employee list.

Employees point at their manager either by ``managerId`` (preferred) or, for
older records, by the manager's ``name``. Name links are compared exactly and
cannot tell two employees with the same name apart; records that need an
unambiguous link should carry ``managerId``.
"""

from __future__ import annotations

import logging
from collections import defaultdict

from hr_analytics.models.analytics import OrgChart, OrgNode
from hr_analytics.models.employee import Employee

logger = logging.getLogger(__name__)

# Legacy "no manager" markers found in name-linked records. "null" is the
# literal text, not a missing value.
LEGACY_ROOT_SENTINELS = frozenset({"Board", "Board Committee", "null"})


def is_root(employee: Employee) -> bool:
    if employee.manager_id:
        return False
    return not employee.manager or employee.manager in LEGACY_ROOT_SENTINELS


def _matches_search(employee: Employee, search: str | None) -> bool:
    if not search:
        return True
    needle = search.lower()
    return (
        needle in employee.name.lower()
        or needle in employee.department.lower()
        or needle in employee.designation.lower()
    )


class ReportingLines:
    """Adjacency index over one employee snapshot."""

    def __init__(self, employees: list[Employee]) -> None:
        self.employees = list(employees)
        self._position = {id(e): i for i, e in enumerate(self.employees)}
        self._by_manager_id: dict[str, list[Employee]] = defaultdict(list)
        self._by_manager_name: dict[str, list[Employee]] = defaultdict(list)

        for emp in self.employees:
            if emp.manager_id:
                self._by_manager_id[emp.manager_id].append(emp)
            elif emp.manager and emp.manager not in LEGACY_ROOT_SENTINELS:
                self._by_manager_name[emp.manager].append(emp)

    def roots(self) -> list[Employee]:
        return [e for e in self.employees if is_root(e)]

    def reports_of(self, employee: Employee) -> list[Employee]:
        by_id = self._by_manager_id.get(employee.id, [])
        by_name = self._by_manager_name.get(employee.name, [])
        if not by_id:
            return list(by_name)
        if not by_name:
            return list(by_id)
        return sorted(by_id + by_name, key=lambda e: self._position.get(id(e), 0))

    def subtree(
        self,
        employee: Employee,
        *,
        search: str | None = None,
        placed: set[str] | None = None,
    ) -> OrgNode:
        """Build the tree under ``employee`` without recursion.

        An employee already present in ``placed`` is not expanded again, so
        a cyclic manager chain ends the branch instead of looping. Siblings
        are expanded in input order, so a report shared by two same-named
        managers lands under the first of them.
        """
        placed = set() if placed is None else placed
        placed.add(employee.id)
        top = _to_node(employee, search)

        stack: list[tuple[Employee, OrgNode]] = [(employee, top)]
        while stack:
            current, node = stack.pop()
            reports = self.reports_of(current)
            expanded: list[tuple[Employee, OrgNode]] = []
            for child in reports:
                if child.id in placed:
                    logger.warning(
                        "Employee %s already placed in org chart; skipping under %s",
                        child.id,
                        current.id,
                    )
                    continue
                placed.add(child.id)
                child_node = _to_node(child, search)
                node.children.append(child_node)
                expanded.append((child, child_node))
            node.direct_reports = len(reports)
            stack.extend(reversed(expanded))

        return top


def _to_node(employee: Employee, search: str | None) -> OrgNode:
    return OrgNode(
        id=employee.id,
        name=employee.name,
        department=employee.department,
        designation=employee.designation,
        matched=_matches_search(employee, search),
    )


def tree_depth(node: OrgNode) -> int:
    deepest = 0
    stack: list[tuple[OrgNode, int]] = [(node, 1)]
    while stack:
        current, level = stack.pop()
        deepest = max(deepest, level)
        stack.extend((child, level + 1) for child in current.children)
    return deepest


def roots_of(employees: list[Employee]) -> list[Employee]:
    return ReportingLines(employees).roots()


def direct_reports_of(employee: Employee, employees: list[Employee]) -> list[Employee]:
    return ReportingLines(employees).reports_of(employee)


def subtree_of(employee: Employee, employees: list[Employee]) -> OrgNode:
    return ReportingLines(employees).subtree(employee)


def build_org_chart(employees: list[Employee], search: str | None = None) -> OrgChart:
    lines = ReportingLines(employees)
    placed: set[str] = set()

    roots = [lines.subtree(root, search=search, placed=placed) for root in lines.roots()]

    orphans: list[OrgNode] = []
    for emp in lines.employees:
        if emp.id in placed:
            continue
        node = _to_node(emp, search)
        node.direct_reports = len(lines.reports_of(emp))
        orphans.append(node)

    if orphans:
        logger.info("Org chart has %d employees with an unresolved manager", len(orphans))

    return OrgChart(
        roots=roots,
        orphans=orphans,
        headcount=len(lines.employees),
        leaders=len(roots),
        departments=len({e.department for e in lines.employees}),
        depth=max((tree_depth(r) for r in roots), default=0),
    )
