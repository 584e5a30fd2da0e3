from __future__ import annotations

from imgix_url import Auto, ClientHints, ColorSpace, Crop, Fit, ImgixUrl, Rect, Y
from imgix_url.url import encode_query


def test_params_follow_call_order() -> None:
    url = ImgixUrl.build("https://foo.com").blur(40).q(40).w(300).finish()
    assert url == "https://foo.com/?blur=40&q=40&w=300"


def test_fit_and_aspect_ratio() -> None:
    url = ImgixUrl.build("https://foo.com").blur(40).q(40).w(300).fit(Fit.CROP).ar(9, 1).finish()
    assert url == "https://foo.com/?blur=40&q=40&w=300&fit=crop&ar=9:1"


def test_empty_builder_keeps_trailing_query_marker() -> None:
    assert ImgixUrl.build("https://foo.com").finish() == "https://foo.com/?"


def test_base_url_is_not_normalized() -> None:
    assert ImgixUrl.build("https://foo.com/").w(1).finish() == "https://foo.com//?w=1"
    assert ImgixUrl.build("https://foo.com/a.jpg?x=1").h(2).finish() == (
        "https://foo.com/a.jpg?x=1/?h=2"
    )


def test_repeated_parameter_is_appended_not_replaced() -> None:
    url = ImgixUrl.build("https://foo.com").w(100).h(50).w(200).finish()
    assert url == "https://foo.com/?w=100&h=50&w=200"


def test_every_setter() -> None:
    url = (
        ImgixUrl.build("https://assets.imgix.net/photo.jpg")
        .q(75)
        .w(300)
        .h(200)
        .dpr(2)
        .bg("fff")
        .blur(20)
        .faceindex(1)
        .facepad(10)
        .ar(16, 9)
        .auto(Auto.build().compress().redeye().finish())
        .rect(Rect(x=300, y=Y.BOTTOM, w=100, h=50))
        .fit(Fit.FACEAREA)
        .crop(Crop.build().faces().edges().finish())
        .cs(ColorSpace.ADOBE_RGB_1998)
        .ch(ClientHints.build().width().save_data().finish())
        .finish()
    )
    assert url == (
        "https://assets.imgix.net/photo.jpg/?q=75&w=300&h=200&dpr=2&bg=fff&blur=20"
        "&faceindex=1&facepad=10&ar=16:9&auto=compress,redeye&rect=300,bottom,100,50"
        "&fit=facearea&crop=faces,edges&cs=adobergb1998&ch=width,save-data"
    )


def test_out_of_range_and_invalid_combinations_pass_through() -> None:
    url = ImgixUrl.build("https://foo.com").q(250).blur(-1).ar(4, 3).fit(Fit.CLIP).finish()
    assert url == "https://foo.com/?q=250&blur=-1&ar=4:3&fit=clip"


def test_empty_flag_set_emits_empty_value() -> None:
    url = ImgixUrl.build("https://foo.com").auto(Auto.build().finish()).finish()
    assert url == "https://foo.com/?auto="


def test_values_are_percent_encoded() -> None:
    url = ImgixUrl.build("https://foo.com").bg("a b&c=#").finish()
    assert url == "https://foo.com/?bg=a%20b%26c%3D%23"


def test_finish_is_repeatable_snapshot() -> None:
    builder = ImgixUrl.build("https://foo.com").w(10)
    assert builder.finish() == builder.finish() == "https://foo.com/?w=10"
    builder.h(20)
    assert builder.finish() == "https://foo.com/?w=10&h=20"
    assert builder.params == (("w", "10"), ("h", "20"))


def test_sub_builder_changes_after_set_do_not_leak() -> None:
    auto_builder = Auto.build().compress()
    url_builder = ImgixUrl.build("https://foo.com").auto(auto_builder.finish())
    auto_builder.enhance()
    assert url_builder.finish() == "https://foo.com/?auto=compress"


def test_independent_builders_share_nothing() -> None:
    first = ImgixUrl.build("https://a.com").w(1)
    second = ImgixUrl.build("https://b.com").h(2)
    assert first.finish() == "https://a.com/?w=1"
    assert second.finish() == "https://b.com/?h=2"


def test_encode_query() -> None:
    assert encode_query([]) == ""
    assert encode_query([("crop", "top,left"), ("ar", "1:1")]) == "crop=top,left&ar=1:1"
