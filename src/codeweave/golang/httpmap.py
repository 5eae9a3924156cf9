"""Route map generator for net/http.

Collects API routes and emits a function registering one handler per route
on a standard library ServeMux, using Go 1.22 method patterns:

    func Map(m *http.ServeMux) {
    	m.HandleFunc("GET /users/{id}", GetUser)
    	m.HandleFunc("POST /users", CreateUser)
    }

Handler names are derived from operation IDs with a configurable casing.
"""

from __future__ import annotations

from codeweave.casing import Casing
from codeweave.errors import CodeweaveError, UnsupportedConstructError
from codeweave.golang.builders import call, member, param, sym
from codeweave.golang.lexical import check_identifier
from codeweave.golang.nodes import Block, ExprStmt, FuncDecl, PointerType, StringLit
from codeweave.golang.unit import Unit
from codeweave.utils.logger import get_logger

logger = get_logger(__name__)

HTTP_METHODS = frozenset(
    {"CONNECT", "DELETE", "GET", "HEAD", "OPTIONS", "PATCH", "POST", "PUT", "TRACE"}
)

MAP_FUNC_NAME = "Map"
MUX_PARAM_NAME = "m"


class RouteMapGenerator:
    """Build the route registration function of a Go unit.

    Args:
        unit: Unit receiving the Map function and the imports it needs
        handler_casing: Casing applied to operation IDs to name handlers
        handler_package: Import path of the package defining the handlers;
            empty when they live in the unit's own package

    """

    __slots__ = ("_unit", "_casing", "_handler_package", "_stmts", "_patterns", "_finalized")

    def __init__(
        self,
        unit: Unit,
        handler_casing: Casing = Casing.PASCAL,
        handler_package: str = "",
    ) -> None:
        self._unit = unit
        self._casing = handler_casing
        self._handler_package = handler_package
        self._stmts: list[ExprStmt] = []
        self._patterns: set[str] = set()
        self._finalized = False

    def add_route(self, method: str, pattern: str, operation_id: str) -> str:
        """Register a route and return the handler name it maps to.

        Raises:
            UnsupportedConstructError: Unknown HTTP method, or a pattern not
                starting with "/"
            CodeweaveError: The route is already registered, or the map was
                finalized
            InvalidIdentifierError: The operation ID gives no usable handler name
        """
        if self._finalized:
            raise CodeweaveError("cannot add routes after finalize()")

        method = method.upper()
        if method not in HTTP_METHODS:
            raise UnsupportedConstructError(method, "is not an HTTP method")
        if not pattern.startswith("/"):
            raise UnsupportedConstructError(pattern, "is not an absolute route pattern")

        route = f"{method} {pattern}"
        if route in self._patterns:
            raise CodeweaveError(f"route {route!r} is already registered")

        handler = check_identifier(self._casing.apply(operation_id), "handler name")
        handler_ref = self._unit.symbol(handler, self._handler_package)

        self._patterns.add(route)
        self._stmts.append(
            ExprStmt(call(member(sym(MUX_PARAM_NAME), "HandleFunc"), StringLit(route), handler_ref))
        )
        logger.debug("Route %s -> %s", route, handler)
        return handler

    def finalize(self) -> FuncDecl:
        """Append the Map function to the unit. Can only be called once."""
        if self._finalized:
            raise CodeweaveError("route map is already finalized")
        self._finalized = True

        mux = self._unit.named_type("ServeMux", "net/http")
        decl = FuncDecl(
            name=MAP_FUNC_NAME,
            params=(param(MUX_PARAM_NAME, PointerType(mux)),),
            body=Block(tuple(self._stmts)),
            doc=f"{MAP_FUNC_NAME} registers the API handlers on {MUX_PARAM_NAME}.",
        )
        self._unit.add(decl)
        logger.debug("Route map finalized with %d routes", len(self._stmts))
        return decl

    def __len__(self) -> int:
        return len(self._stmts)


__all__ = ["HTTP_METHODS", "RouteMapGenerator"]
