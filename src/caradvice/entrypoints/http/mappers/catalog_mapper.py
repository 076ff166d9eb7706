from __future__ import annotations

from dataclasses import replace

from caradvice.domain.catalog_engine import CatalogSearchResult
from caradvice.domain.catalog_query import CatalogQuery
from caradvice.domain.filter_metadata import FilterMetadata, NumericRange
from caradvice.domain.query_serializer import (
    active_filter_names,
    build_catalog_url,
    remove_filters,
)
from caradvice.domain.vehicle import Vehicle
from caradvice.entrypoints.http.dtos.catalog import (
    CatalogLinksDTO,
    CatalogQueryDTO,
    CatalogSearchResponseDTO,
    CompareResponseDTO,
    DisplayPriceDTO,
    FilterMetadataResponseDTO,
    NumericRangeDTO,
    VehicleDetailResponseDTO,
    VehicleResponseDTO,
)
from caradvice.use_cases.compare_vehicles import CompareVehiclesResponse
from caradvice.use_cases.get_vehicle_by_slug import GetVehicleBySlugResponse


class CatalogMapper:
    """Maps domain results to REST response DTOs for the catalog endpoints."""

    @staticmethod
    def to_vehicle_response(vehicle: Vehicle) -> VehicleResponseDTO:
        """
        Converts a domain Vehicle to its REST representation.

        Args:
            vehicle: Domain Vehicle entity

        Returns:
            VehicleResponseDTO with the gallery fallback already applied
        """
        return VehicleResponseDTO(
            id=vehicle.id,
            slug=vehicle.slug,
            type=vehicle.type,
            tipologia=vehicle.tipologia,
            condicion=vehicle.condicion,
            brand=vehicle.brand,
            model=vehicle.model,
            version=vehicle.version,
            year=vehicle.year,
            km=vehicle.km,
            price_ars=vehicle.price_ars,
            price_usd=vehicle.price_usd,
            display_price=CatalogMapper._to_display_price(vehicle),
            transmission=vehicle.transmission,
            fuel=vehicle.fuel,
            color=vehicle.color,
            puertas=vehicle.door_count,  # Domain uses 'door_count', the web client 'puertas'
            extras=list(vehicle.extras),
            cover_image=vehicle.cover_image,
            images=list(vehicle.gallery),
            is_featured=vehicle.is_featured,
        )

    @staticmethod
    def _to_display_price(vehicle: Vehicle) -> DisplayPriceDTO | None:
        price = vehicle.display_price
        if price is None:
            return None
        amount, currency = price
        return DisplayPriceDTO(amount=amount, currency=currency)

    @staticmethod
    def to_query_response(query: CatalogQuery) -> CatalogQueryDTO:
        return CatalogQueryDTO(
            q=query.q,
            tipo=query.tipo,
            tipologia=query.tipologia,
            condicion=query.condicion,
            marca=query.marca,
            modelo=query.modelo,
            version=query.version,
            moneda=query.moneda,
            anio_min=query.anio_min,
            anio_max=query.anio_max,
            precio_min=query.precio_min,
            precio_max=query.precio_max,
            km_min=query.km_min,
            km_max=query.km_max,
            transmision=query.transmision,
            combustible=query.combustible,
            color=query.color,
            puertas=query.puertas,
            extras=query.extras,
            sort=query.sort,
            page=query.page,
            per_page=query.per_page,
        )

    @staticmethod
    def to_links(result: CatalogSearchResult) -> CatalogLinksDTO:
        """
        Builds navigation links from the applied (clamped) query.

        prev/next are None on the first/last page. remove_filters maps each
        active filter to the search without it, for filter-chip links.
        """
        applied = result.applied_params
        prev_url = (
            build_catalog_url(replace(applied, page=result.page - 1)) if result.page > 1 else None
        )
        next_url = (
            build_catalog_url(replace(applied, page=result.page + 1))
            if result.page < result.total_pages
            else None
        )
        return CatalogLinksDTO(
            self_url=build_catalog_url(applied),
            canonical=build_catalog_url(applied, include_defaults=True),
            prev=prev_url,
            next=next_url,
            remove_filters={
                name: build_catalog_url(remove_filters(applied, name))
                for name in active_filter_names(applied)
            },
        )

    @staticmethod
    def to_search_response(result: CatalogSearchResult) -> CatalogSearchResponseDTO:
        """
        Converts a domain search result to the REST response.

        Args:
            result: Domain search result (items already paged)

        Returns:
            CatalogSearchResponseDTO with pagination metadata and links
        """
        return CatalogSearchResponseDTO(
            items=[CatalogMapper.to_vehicle_response(v) for v in result.items],
            total=result.total,
            page=result.page,
            per_page=result.per_page,
            total_pages=result.total_pages,
            applied_params=CatalogMapper.to_query_response(result.applied_params),
            links=CatalogMapper.to_links(result),
        )

    @staticmethod
    def _to_range(value: NumericRange) -> NumericRangeDTO:
        return NumericRangeDTO(min=value.min, max=value.max)

    @staticmethod
    def to_metadata_response(metadata: FilterMetadata) -> FilterMetadataResponseDTO:
        return FilterMetadataResponseDTO(
            brands=metadata.brands,
            models_by_brand=metadata.models_by_brand,
            versions_by_model=metadata.versions_by_model,
            transmissions=metadata.transmissions,
            fuels=metadata.fuels,
            colors=metadata.colors,
            door_counts=metadata.door_counts,
            extras=metadata.extras,
            year_range=CatalogMapper._to_range(metadata.year_range),
            price_range=CatalogMapper._to_range(metadata.price_range),
            price_range_usd=CatalogMapper._to_range(metadata.price_range_usd),
            km_range=CatalogMapper._to_range(metadata.km_range),
        )

    @staticmethod
    def to_detail_response(response: GetVehicleBySlugResponse) -> VehicleDetailResponseDTO:
        return VehicleDetailResponseDTO(
            vehicle=CatalogMapper.to_vehicle_response(response.vehicle),
            similar=[CatalogMapper.to_vehicle_response(v) for v in response.similar],
            viewing_now=response.viewing_now,
            return_to=response.return_to,
        )

    @staticmethod
    def to_compare_response(response: CompareVehiclesResponse) -> CompareResponseDTO:
        return CompareResponseDTO(
            vehicles=[CatalogMapper.to_vehicle_response(v) for v in response.vehicles],
            slugs=response.slugs,
            comparable=response.is_comparable,
        )
